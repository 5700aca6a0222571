import pytest

from cookbook_entry import CookbookRecipeBuilder, InvalidRecipeError

RAW = """**Recipe: Veggie Omelette**
A quick breakfast using leftover vegetables.
**Prep Time:** 5 min
**Cooking Time:** 10 min
**Ingredients:**
- 3 eggs
- 1 pepper
**Instructions:**
1. Whisk the eggs.
2. Cook with the pepper.
"""


def test_builder_uses_parsed_fallbacks():
    recipe = CookbookRecipeBuilder().build({"mealType": "Breakfast"}, RAW)

    assert recipe.title == "Veggie Omelette"
    assert recipe.description == "A quick breakfast using leftover vegetables."
    assert recipe.prep_time == 5
    assert recipe.cooking_time == 10
    assert recipe.ingredients == ["3 eggs", "1 pepper"]
    assert recipe.instructions == ["Whisk the eggs.", "Cook with the pepper."]
    assert recipe.meal_type == "Breakfast"
    assert recipe.source == "ai"
    assert recipe.content.startswith("# Veggie Omelette\n\n")


def test_builder_prefers_client_values():
    payload = {
        "title": "Sunday Omelette",
        "prepTime": 8,
        "ingredients": ["eggs", "peppers"],
        "instructions": "Whisk\n\nCook",
        "imageURL": "https://img.example.com/omelette.jpg",
        "source": "user",
    }
    recipe = CookbookRecipeBuilder().build(payload, RAW)

    assert recipe.title == "Sunday Omelette"
    assert recipe.prep_time == 8
    assert recipe.cooking_time == 10
    assert recipe.ingredients == ["eggs", "peppers"]
    assert recipe.instructions == ["Whisk", "Cook"]
    assert recipe.image_url == "https://img.example.com/omelette.jpg"
    assert recipe.source == "user"


@pytest.mark.parametrize(
    "payload",
    [
        {"ingredients": 5, "instructions": True},
        {"ingredients": {"eggs": 3}, "instructions": 2.5},
    ],
)
def test_builder_ignores_badly_typed_lists(payload):
    recipe = CookbookRecipeBuilder().build(payload, RAW)

    assert recipe.ingredients == ["3 eggs", "1 pepper"]
    assert recipe.instructions == ["Whisk the eggs.", "Cook with the pepper."]


def test_builder_accepts_tuple_lists():
    recipe = CookbookRecipeBuilder().build({"ingredients": ("eggs", " ", 4)}, RAW)
    assert recipe.ingredients == ["eggs", "4"]


def test_builder_default_source():
    recipe = CookbookRecipeBuilder(default_source="manual").build(None, RAW)
    assert recipe.source == "manual"


def test_builder_rejects_missing_title():
    with pytest.raises(InvalidRecipeError):
        CookbookRecipeBuilder().build({}, "")

    with pytest.raises(ValueError):
        CookbookRecipeBuilder().build({"title": "Generated Recipe"}, "   ")


def test_client_title_rescues_empty_text():
    recipe = CookbookRecipeBuilder().build({"title": "Toast"}, "")
    assert recipe.title == "Toast"
    assert recipe.ingredients == []
    assert recipe.prep_time == 0


def test_to_document_uses_client_field_names():
    document = CookbookRecipeBuilder().build({}, RAW).to_document()

    assert set(document) == {
        "title", "description", "mealType", "cuisineType", "difficulty",
        "prepTime", "cookingTime", "ingredients", "instructions",
        "imageURL", "rating", "source", "content",
    }
    assert document["prepTime"] == 5
    assert document["rating"] is None
