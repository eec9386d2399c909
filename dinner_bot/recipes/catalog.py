"""Supported recipe sources and main ingredients.

Adding a recipe source means adding one RecipeSource member, one entry in
SEARCH_URL_TEMPLATES, BASE_URLS and INGREDIENT_TERMS, and one extraction rule
in ``dinner_bot.recipes.extractor``.
"""

from enum import Enum
from typing import Optional, Union
from urllib.parse import quote_plus

from dinner_bot.utils.errors import UnsupportedSourceError


class RecipeSource(str, Enum):
    """Recipe websites the bot can query."""

    TINE = "tine"
    MATPRAT = "matprat"

    @property
    def display_name(self) -> str:
        return DISPLAY_NAMES[self]

    @property
    def base_url(self) -> str:
        return BASE_URLS[self]


class Ingredient(str, Enum):
    """Main ingredients a user can ask for."""

    MEAT = "meat"
    FISH = "fish"
    PLANTS = "plants"


DISPLAY_NAMES = {
    RecipeSource.TINE: "Tine",
    RecipeSource.MATPRAT: "Matprat",
}

BASE_URLS = {
    RecipeSource.TINE: "https://www.tine.no",
    RecipeSource.MATPRAT: "https://www.matprat.no",
}

SEARCH_URL_TEMPLATES = {
    RecipeSource.TINE: "https://www.tine.no/oppskrifter/sok/oppskrifter?q={term}",
    RecipeSource.MATPRAT: "https://www.matprat.no/sok/?q={term}",
}

# Spoken forms the speech recognizer produces instead of the source name
SOURCE_ALIASES = {
    "fine": RecipeSource.TINE,
    "mat prat": RecipeSource.MATPRAT,
}

# Both sites are Norwegian and expect Norwegian search terms
INGREDIENT_TERMS = {
    RecipeSource.TINE: {
        Ingredient.MEAT: "kjøtt",
        Ingredient.FISH: "fisk",
        Ingredient.PLANTS: "vegetar",
    },
    RecipeSource.MATPRAT: {
        Ingredient.MEAT: "kjøtt",
        Ingredient.FISH: "fisk",
        Ingredient.PLANTS: "vegetarmiddag",
    },
}

# Used when the ingredient is not in the table: search for "dinner"
DEFAULT_TERM = "middag"


def find_source(value: Optional[str]) -> Optional[RecipeSource]:
    """Look up a recipe source by slot value, case-insensitively.

    Accepts member values ("tine") and spoken aliases ("fine").
    Returns None when nothing matches.
    """
    if isinstance(value, RecipeSource):
        return value
    if not value:
        return None
    key = value.strip().lower()
    try:
        return RecipeSource(key)
    except ValueError:
        return SOURCE_ALIASES.get(key)


def resolve_source(value: Union[str, RecipeSource, None]) -> RecipeSource:
    """Like find_source, but raises UnsupportedSourceError when nothing matches."""
    source = find_source(value)
    if source is None:
        raise UnsupportedSourceError(value)
    return source


def find_ingredient(value: Optional[str]) -> Optional[Ingredient]:
    """Look up an ingredient by slot value, case-insensitively."""
    if isinstance(value, Ingredient):
        return value
    if not value:
        return None
    try:
        return Ingredient(value.strip().lower())
    except ValueError:
        return None


def translate_ingredient(ingredient: Optional[str], source: RecipeSource) -> str:
    """Return the search term the source expects for an ingredient.

    Unknown ingredients fall back to DEFAULT_TERM.
    """
    known = find_ingredient(ingredient)
    if known is None:
        return DEFAULT_TERM
    return INGREDIENT_TERMS[source][known]


def build_search_url(ingredient: Optional[str], source: Union[str, RecipeSource]) -> str:
    """Build the search URL for an ingredient on a recipe source.

    Args:
        ingredient: Main ingredient slot value (English).
        source: RecipeSource member, or its slot value / alias.

    Returns:
        Fully-qualified search URL with the translated, percent-encoded term.

    Raises:
        UnsupportedSourceError: If the source is not supported.
    """
    recipe_source = resolve_source(source)
    term = translate_ingredient(ingredient, recipe_source)
    return SEARCH_URL_TEMPLATES[recipe_source].format(term=quote_plus(term))
