from typing import List, Optional, Tuple

from constants import (
    BOLD_EDGES_RE,
    BOLD_LABEL_RE,
    HEADING_PREFIX_RE,
    HOURS_RE,
    INTRO_RE,
    LIST_PREFIX_RE,
    MINUTES_RE,
    RECIPE_LABEL_RE,
    SECTION_HEADER_RE,
    SECTION_HEADING_RE,
    TITLE_PATTERNS,
)


def split_lines(text: str) -> List[str]:
    return [l.strip() for l in (text or "").split("\n") if l.strip()]


def is_conversational_intro(line: str) -> bool:
    return bool(INTRO_RE.match(line))


def drop_conversational_intros(lines: List[str]) -> List[str]:
    # "Okay, here's a recipe for ..." preambles from the generator
    return [l for l in lines if not is_conversational_intro(l)]


def strip_title_decorations(line: str) -> str:
    t = HEADING_PREFIX_RE.sub("", line)
    t = BOLD_EDGES_RE.sub("", t)
    t = RECIPE_LABEL_RE.sub("", t)
    return t.strip()


def is_bold_label(line: str) -> bool:
    return bool(BOLD_LABEL_RE.match(line))


def is_section_header(line: str) -> bool:
    return bool(SECTION_HEADER_RE.match(line))


def find_title(lines: List[str]) -> Tuple[str, int]:
    """Return ``(title, index)``; index is -1 when there are no lines.

    Tried in order: a decorated line (bold, heading or ``Recipe:``), the
    first line that is not a ``**Label:**`` line, then the first line.
    """
    for i, line in enumerate(lines):
        if any(p.search(line) for p in TITLE_PATTERNS):
            return strip_title_decorations(line), i

    for i, line in enumerate(lines):
        if not is_bold_label(line):
            return strip_title_decorations(line), i

    if lines:
        return strip_title_decorations(lines[0]), 0
    return "", -1


def to_minutes(text: str) -> int:
    """Convert "1 hour 30 min", "45 min", "2 h" or "30" into minutes."""
    if not text or not text.strip():
        return 0

    hours = HOURS_RE.search(text)
    minutes = MINUTES_RE.search(text)
    if hours or minutes:
        total = 0.0
        if hours:
            total += float(hours.group(1)) * 60
        if minutes:
            total += float(minutes.group(1))
        return int(round(total))

    bare = text.strip()
    if len(bare.lstrip("-")) > 6:
        return 0
    try:
        return max(0, int(bare))
    except ValueError:
        return 0


def _heading_name(line: str) -> Optional[str]:
    if not SECTION_HEADING_RE.match(line):
        return None
    name = HEADING_PREFIX_RE.sub("", line).replace("*", "")
    return name.strip().rstrip(":").strip().lower()


def section_items(text: str, header: str) -> List[str]:
    """List items under a ``**Header:**`` or ``## Header`` block, unprefixed.

    The block ends at the next heading or ``**Label:**`` line.
    """
    wanted = header.strip().rstrip(":").lower()
    items: List[str] = []
    inside = False
    for line in split_lines(text):
        if inside and (_heading_name(line) is not None or is_bold_label(line)):
            break
        if inside:
            item = LIST_PREFIX_RE.sub("", line).strip()
            if item:
                items.append(item)
            continue
        if _heading_name(line) == wanted:
            inside = True
    return items
