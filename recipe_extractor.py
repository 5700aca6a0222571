from functools import reduce
from typing import List, Optional, Tuple

from constants import BOLD_LINE_RE, FIELD_PATTERNS
from logging_config import get_logger
from recipe_models import ExtractionState, ParsedRecipeText
from recipe_parser import (
    drop_conversational_intros,
    find_title,
    is_bold_label,
    is_section_header,
    split_lines,
    to_minutes,
)

logger = get_logger(__name__)


def match_field(line: str) -> Tuple[Optional[str], str]:
    """Return ``(state_attribute, value)`` for a ``**Field:** value`` line."""
    for key, pattern in FIELD_PATTERNS:
        m = pattern.match(line)
        if m:
            return key, m.group(1).strip()
    return None, ""


def _needs_separator(buffer: List[str]) -> bool:
    return bool(buffer) and buffer[-1] != ""


def step(state: ExtractionState, numbered_line: Tuple[int, str]) -> ExtractionState:
    """Fold one source line into the state and return the new state."""
    idx, line = numbered_line
    buffer = list(state.formatted_lines)
    changes = {}

    key, value = match_field(line)
    if key and idx != state.title_index + 1 and _needs_separator(buffer):
        buffer.append("")
    if BOLD_LINE_RE.match(line) and idx != state.title_index and _needs_separator(buffer):
        buffer.append("")

    position = len(buffer)
    buffer.append(line)
    changes["formatted_lines"] = tuple(buffer)

    if key:
        changes[key] = value
        if key == "description":
            changes["description_index"] = position
    if idx == state.title_index:
        changes["title_position"] = position

    if (
        not state.description
        and key != "description"
        and not state.implicit_description
        and idx > state.title_index
        and not is_bold_label(line)
        and not is_section_header(line)
    ):
        changes["implicit_description"] = line
        changes["implicit_description_index"] = position

    return state.evolve(**changes)


def _collapse_blanks(lines: List[str]) -> List[str]:
    out: List[str] = []
    for l in lines:
        if l == "" and (not out or out[-1] == ""):
            continue
        out.append(l)
    while out and out[-1] == "":
        out.pop()
    return out


def assemble(title: str, buffer: List[str], title_position: Optional[int]) -> str:
    body = [l for i, l in enumerate(buffer) if i != title_position]
    heading = f"# {title}"
    text = "\n".join(_collapse_blanks(body)).strip()
    return f"{heading}\n\n{text}" if text else heading


def extract(raw_text: str) -> ParsedRecipeText:
    """Pull title, description and times out of generated recipe text.

    Never raises; missing pieces come back empty or zero.
    """
    lines = drop_conversational_intros(split_lines(raw_text))
    title, title_index = find_title(lines)
    if title_index < 0:
        logger.warning("No usable lines in recipe text (%d chars)", len(raw_text or ""))

    state = reduce(step, enumerate(lines), ExtractionState(title_index=title_index))

    if state.description:
        description, description_index = state.description, state.description_index
    else:
        description = state.implicit_description
        description_index = state.implicit_description_index

    buffer = list(state.formatted_lines)
    title_position = state.title_position

    if (
        description_index is not None
        and description_index < len(buffer) - 1
        and buffer[description_index + 1] != ""
    ):
        buffer.insert(description_index + 1, "")
        if title_position is not None and title_position > description_index:
            title_position += 1

    if (
        title_position is not None
        and title_position < len(buffer) - 1
        and buffer[title_position + 1] != ""
    ):
        buffer.insert(title_position + 1, "")

    prep_minutes = to_minutes(state.prep_time_raw)
    cook_minutes = to_minutes(state.cook_time_raw)
    for label, raw, minutes in (
        ("prep", state.prep_time_raw, prep_minutes),
        ("cook", state.cook_time_raw, cook_minutes),
    ):
        if raw and not minutes:
            logger.warning("Could not read %s time from %r", label, raw)

    parsed = ParsedRecipeText(
        title=title,
        description=description,
        prep_time_minutes=prep_minutes,
        cook_time_minutes=cook_minutes,
        normalized_text=assemble(title, buffer, title_position),
    )
    logger.debug(
        "Extracted title=%r prep=%s cook=%s description=%d chars",
        parsed.title,
        parsed.prep_time_minutes,
        parsed.cook_time_minutes,
        len(parsed.description),
    )
    return parsed
