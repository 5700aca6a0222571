import re
from typing import Pattern, List, Tuple

INTRO_RE = re.compile(r"^(?:okay|here['’]s|this is)(?:[\s,.!:;\-]+|$)", re.I)

HEADING_PREFIX_RE = re.compile(r"^#+\s*")
BOLD_EDGES_RE = re.compile(r"^\*\*|\*\*$")
RECIPE_LABEL_RE = re.compile(r"^\s*Recipe\b:?\s*", re.I)

BOLD_LINE_RE = re.compile(r"^\*\*.+\*\*$")
HEADING_LINE_RE = re.compile(r"^#+\s*\w+")
RECIPE_TOKEN_RE = re.compile(r"Recipe:", re.I)

# **Label:** with or without a value after it
BOLD_LABEL_RE = re.compile(r"^\*\*[^*]+:\*\*")
SECTION_HEADER_RE = re.compile(r"^\*\*(?:Ingredients|Instructions):\*\*", re.I)

# Priority order matters: the first pattern that matches wins.
TITLE_PATTERNS: List[Pattern[str]] = [
    BOLD_LINE_RE,
    HEADING_LINE_RE,
    RECIPE_TOKEN_RE,
]

FIELD_PATTERNS: List[Tuple[str, Pattern[str]]] = [
    ("prep_time_raw", re.compile(r"^\*\*Prep\s*Time:\*\*\s*(.+)$", re.I)),
    ("cook_time_raw", re.compile(r"^\*\*Cook(?:ing)?\s*Time:\*\*\s*(.+)$", re.I)),
    ("description", re.compile(r"^\*\*Description:\*\*\s*(.+)$", re.I)),
]

# Bounded digit runs that do not start mid-number.
HOURS_RE = re.compile(r"(?<![\d.])(\d{1,6}(?:\.\d{1,6})?)\s*(?:hours?|hrs?|h)(?![a-z])", re.I)
MINUTES_RE = re.compile(r"(?<![\d.])(\d{1,6}(?:\.\d{1,6})?)\s*(?:minutes?|mins?|m)(?![a-z])", re.I)

PLACEHOLDER_STRINGS = {
    "Generated Recipe",
    "A recipe generated based on your ingredients.",
}

SECTION_HEADING_RE = re.compile(r"^(?:\*\*[^*]+:?\*\*:?|#+\s*.+)$")

LIST_PREFIX_RE = re.compile(r"^\s*(?:[-\*•]|\d+[\).])\s*")
