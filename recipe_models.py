from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


@dataclass(frozen=True)
class ParsedRecipeText:
    """Fields pulled out of free-form recipe text, plus the reflowed markdown."""

    title: str = ""
    description: str = ""
    prep_time_minutes: int = 0
    cook_time_minutes: int = 0
    normalized_text: str = ""


@dataclass(frozen=True)
class ExtractionState:
    """Accumulator threaded through the line-by-line field pass.

    ``formatted_lines`` is the output buffer; blank entries are separators.
    Positions are indexes into that buffer, not into the source lines.
    """

    title_index: int = -1
    formatted_lines: Tuple[str, ...] = ()
    prep_time_raw: str = ""
    cook_time_raw: str = ""
    description: str = ""
    description_index: Optional[int] = None
    title_position: Optional[int] = None
    implicit_description: str = ""
    implicit_description_index: Optional[int] = None

    def evolve(self, **changes: Any) -> "ExtractionState":
        return replace(self, **changes)


class FieldKind(Enum):
    STRING = "string"
    NUMERIC = "numeric"
    OPAQUE = "opaque"


# Client field name -> resolved value, handed straight to persistence.
RecipeFieldSet = Dict[str, Any]


@dataclass
class CookbookRecipe:
    """A recipe as stored inside a cookbook."""

    title: str
    description: str = ""
    prep_time: int = 0
    cooking_time: int = 0
    ingredients: List[str] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)
    meal_type: Optional[str] = None
    cuisine_type: Optional[str] = None
    difficulty: Optional[str] = None
    image_url: Optional[str] = None
    rating: Optional[float] = None
    source: str = "ai"
    content: str = ""

    def to_document(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "mealType": self.meal_type,
            "cuisineType": self.cuisine_type,
            "difficulty": self.difficulty,
            "prepTime": self.prep_time,
            "cookingTime": self.cooking_time,
            "ingredients": list(self.ingredients),
            "instructions": list(self.instructions),
            "imageURL": self.image_url,
            "rating": self.rating,
            "source": self.source,
            "content": self.content,
        }
