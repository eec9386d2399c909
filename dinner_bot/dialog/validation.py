"""Slot validation for the Suggest_dinner intent."""

from typing import Optional

from dinner_bot.models.models import Message, ValidationResult
from dinner_bot.recipes.catalog import RecipeSource, find_ingredient, find_source


RECIPE_LIBRARY_SLOT = "RecipeLibrary"
MAIN_INGREDIENT_SLOT = "MainIngredient"


def build_validation_result(
    is_valid: bool,
    violated_slot: Optional[str] = None,
    message_content: Optional[str] = None,
) -> ValidationResult:
    if message_content is None:
        return ValidationResult(is_valid=is_valid, violated_slot=violated_slot)
    return ValidationResult(
        is_valid=is_valid,
        violated_slot=violated_slot,
        message=Message(content=message_content),
    )


def _supported_sources_text() -> str:
    names = [source.display_name for source in RecipeSource]
    if len(names) == 1:
        return names[0]
    return ", ".join(names[:-1]) + " and " + names[-1]


def validate_suggest_dinner(
    main_ingredient: Optional[str],
    recipe_library: Optional[str],
) -> ValidationResult:
    """Check the user-supplied slots against the supported values.

    Empty slots are not violations; the platform elicits them itself.
    RecipeLibrary is checked before MainIngredient and only the first
    violation is reported.
    """
    if recipe_library and find_source(recipe_library) is None:
        return build_validation_result(
            False,
            RECIPE_LIBRARY_SLOT,
            f"We do not support recipes from {recipe_library}. "
            f"At the moment we only support {_supported_sources_text()}.",
        )

    if main_ingredient and find_ingredient(main_ingredient) is None:
        return build_validation_result(
            False,
            MAIN_INGREDIENT_SLOT,
            f"I don't know about {main_ingredient}. Try something else, for example fish.",
        )

    return build_validation_result(True)
