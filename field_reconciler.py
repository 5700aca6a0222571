"""Decide, field by field, whether a client value or the parsed fallback wins."""
from numbers import Real
from typing import Any, List, Mapping, Optional, Tuple

from constants import PLACEHOLDER_STRINGS
from recipe_models import FieldKind, ParsedRecipeText, RecipeFieldSet

# (client key, kind, ParsedRecipeText attribute)
RECONCILED_FIELDS: List[Tuple[str, FieldKind, str]] = [
    ("title", FieldKind.STRING, "title"),
    ("description", FieldKind.STRING, "description"),
    ("prepTime", FieldKind.NUMERIC, "prep_time_minutes"),
    ("cookingTime", FieldKind.NUMERIC, "cook_time_minutes"),
]


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def kind_of(fallback: Any) -> FieldKind:
    if isinstance(fallback, str):
        return FieldKind.STRING
    if _is_number(fallback):
        return FieldKind.NUMERIC
    return FieldKind.OPAQUE


def is_usable_text(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    trimmed = value.strip()
    return bool(trimmed) and trimmed not in PLACEHOLDER_STRINGS


def resolve(client_value: Any, fallback_value: Any, kind: Optional[FieldKind] = None) -> Any:
    """Pick ``client_value`` unless it is missing or rejected for its kind.

    ``None`` stands for an absent client value. A numeric client value of
    zero counts as absent as well.
    """
    if kind is None:
        kind = kind_of(fallback_value)

    if kind is FieldKind.STRING:
        return client_value if is_usable_text(client_value) else fallback_value
    if kind is FieldKind.NUMERIC:
        if _is_number(client_value) and client_value > 0:
            return client_value
        return fallback_value
    return client_value if client_value is not None else fallback_value


def reconcile_fields(payload: Mapping[str, Any], parsed: ParsedRecipeText) -> RecipeFieldSet:
    return {
        key: resolve(payload.get(key), getattr(parsed, attr), kind)
        for key, kind, attr in RECONCILED_FIELDS
    }
