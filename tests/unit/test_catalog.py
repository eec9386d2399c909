"""Unit tests for the recipe source catalog: translation and search URLs."""

import pytest

from dinner_bot.recipes.catalog import (
    BASE_URLS,
    DEFAULT_TERM,
    DISPLAY_NAMES,
    INGREDIENT_TERMS,
    SEARCH_URL_TEMPLATES,
    Ingredient,
    RecipeSource,
    build_search_url,
    find_ingredient,
    find_source,
    resolve_source,
    translate_ingredient,
)
from dinner_bot.recipes.extractor import EXTRACTION_RULES
from dinner_bot.utils.errors import UnsupportedSourceError


class TestSourceTables:
    """Every source must be fully wired up."""

    @pytest.mark.parametrize("source", list(RecipeSource))
    def test_source_has_every_table_entry(self, source):
        """Test that each source has a name, URLs, rules and every ingredient term."""
        assert source in DISPLAY_NAMES
        assert source in BASE_URLS
        assert source in SEARCH_URL_TEMPLATES
        assert source in EXTRACTION_RULES
        assert set(INGREDIENT_TERMS[source]) == set(Ingredient)

    def test_templates_take_a_term(self):
        """Test that every search URL template has a term placeholder."""
        for template in SEARCH_URL_TEMPLATES.values():
            assert "{term}" in template


class TestFindSource:
    """Test slot value to RecipeSource lookup."""

    def test_exact_value(self):
        """Test lookup by the exact slot value."""
        assert find_source("tine") is RecipeSource.TINE

    def test_case_insensitive(self):
        """Test that lookup ignores case."""
        assert find_source("MatPrat") is RecipeSource.MATPRAT

    def test_surrounding_whitespace(self):
        """Test that lookup ignores surrounding whitespace."""
        assert find_source("  tine ") is RecipeSource.TINE

    def test_spoken_alias(self):
        """Speech recognition hears "Tine" as "fine"."""
        assert find_source("Fine") is RecipeSource.TINE

    def test_unknown(self):
        """Test that an unknown source gives None."""
        assert find_source("allrecipes") is None

    def test_absent(self):
        """Test that a missing or empty value gives None."""
        assert find_source(None) is None
        assert find_source("") is None

    def test_resolve_raises_for_unknown(self):
        """Test that resolving an unknown source raises with the raw value."""
        with pytest.raises(UnsupportedSourceError) as exc_info:
            resolve_source("allrecipes")
        assert exc_info.value.source == "allrecipes"

    def test_resolve_raises_for_absent(self):
        """Test that resolving a missing source raises."""
        with pytest.raises(UnsupportedSourceError):
            resolve_source(None)

    def test_unsupported_source_error_is_value_error(self):
        """Test that UnsupportedSourceError can be caught as ValueError."""
        with pytest.raises(ValueError):
            resolve_source("nope")


class TestTranslateIngredient:
    """Test English ingredient to Norwegian search term translation."""

    def test_fish(self):
        """Test that fish translates to fisk."""
        assert translate_ingredient("fish", RecipeSource.TINE) == "fisk"

    def test_meat_case_insensitive(self):
        """Test that translation ignores case."""
        assert translate_ingredient("MEAT", RecipeSource.MATPRAT) == "kjøtt"

    def test_plants_differs_per_source(self):
        """Test that each source has its own vegetarian term."""
        assert translate_ingredient("plants", RecipeSource.TINE) == "vegetar"
        assert translate_ingredient("plants", RecipeSource.MATPRAT) == "vegetarmiddag"

    def test_unknown_falls_back_to_default_term(self):
        """Test that an unknown ingredient searches the default term."""
        assert translate_ingredient("tofu", RecipeSource.TINE) == DEFAULT_TERM

    def test_absent_falls_back_to_default_term(self):
        """Test that a missing ingredient searches the default term."""
        assert translate_ingredient(None, RecipeSource.MATPRAT) == DEFAULT_TERM

    def test_find_ingredient(self):
        """Test ingredient lookup."""
        assert find_ingredient(" Fish ") is Ingredient.FISH
        assert find_ingredient("tofu") is None


class TestBuildSearchUrl:
    """Test search URL construction."""

    def test_tine_fish(self):
        """Test the tine.no search URL."""
        assert build_search_url("fish", RecipeSource.TINE) == (
            "https://www.tine.no/oppskrifter/sok/oppskrifter?q=fisk"
        )

    def test_matprat_fish(self):
        """Test the matprat.no search URL."""
        assert build_search_url("fish", RecipeSource.MATPRAT) == "https://www.matprat.no/sok/?q=fisk"

    def test_sources_give_distinct_urls_with_translated_term(self):
        """Test that sources differ and both search the Norwegian term."""
        tine_url = build_search_url("fish", RecipeSource.TINE)
        matprat_url = build_search_url("fish", RecipeSource.MATPRAT)

        assert tine_url != matprat_url
        for url in (tine_url, matprat_url):
            assert "q=fisk" in url
            assert "fish" not in url

    def test_term_is_percent_encoded(self):
        """Test that non-ASCII terms are percent-encoded."""
        url = build_search_url("meat", RecipeSource.TINE)
        assert url.endswith("?q=kj%C3%B8tt")
        assert "ø" not in url

    def test_accepts_slot_value(self):
        """Test that a raw slot value works as the source."""
        assert build_search_url("fish", "matprat") == build_search_url("fish", RecipeSource.MATPRAT)

    def test_accepts_alias(self):
        """Test that a spoken alias works as the source."""
        assert build_search_url("fish", "fine") == build_search_url("fish", RecipeSource.TINE)

    def test_unknown_ingredient_searches_default_term(self):
        """Test that an unknown ingredient still builds a URL."""
        assert build_search_url("tofu", RecipeSource.TINE).endswith(f"?q={DEFAULT_TERM}")

    def test_unknown_source_raises(self):
        """Test that an unknown source raises UnsupportedSourceError."""
        with pytest.raises(UnsupportedSourceError):
            build_search_url("fish", "allrecipes")
