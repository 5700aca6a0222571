from typing import Any, List, Mapping, Optional

from field_reconciler import reconcile_fields, resolve
from logging_config import get_logger
from recipe_extractor import extract
from recipe_models import CookbookRecipe, FieldKind
from recipe_parser import section_items

logger = get_logger(__name__)


class InvalidRecipeError(ValueError):
    """The reconciled recipe cannot be stored (e.g. it has no title)."""


def _string_list(value: Any) -> Optional[List[str]]:
    """Client list field as strings; anything not text or a list counts as absent."""
    if isinstance(value, str):
        value = value.split("\n")
    elif not isinstance(value, (list, tuple)):
        return None
    return [str(v).strip() for v in value if str(v).strip()]


class CookbookRecipeBuilder:
    """Turns a generated recipe and the client's payload into a cookbook entry."""

    def __init__(self, default_source: str = "ai"):
        self.default_source = default_source

    def build(self, payload: Optional[Mapping[str, Any]], raw_text: str) -> CookbookRecipe:
        payload = payload or {}
        parsed = extract(raw_text)
        fields = reconcile_fields(payload, parsed)

        if not fields["title"]:
            logger.warning("Rejecting recipe without a title")
            raise InvalidRecipeError("Recipe title is required.")

        ingredients = resolve(
            _string_list(payload.get("ingredients")),
            section_items(parsed.normalized_text, "Ingredients"),
            FieldKind.OPAQUE,
        )
        instructions = resolve(
            _string_list(payload.get("instructions")),
            section_items(parsed.normalized_text, "Instructions"),
            FieldKind.OPAQUE,
        )

        recipe = CookbookRecipe(
            title=fields["title"],
            description=fields["description"],
            prep_time=fields["prepTime"],
            cooking_time=fields["cookingTime"],
            ingredients=ingredients,
            instructions=instructions,
            meal_type=payload.get("mealType"),
            cuisine_type=payload.get("cuisineType"),
            difficulty=payload.get("difficulty"),
            image_url=payload.get("imageURL"),
            rating=payload.get("rating"),
            source=payload.get("source") or self.default_source,
            content=parsed.normalized_text,
        )
        logger.info(
            "Built cookbook recipe %r (%d ingredients, %d steps)",
            recipe.title,
            len(recipe.ingredients),
            len(recipe.instructions),
        )
        return recipe
