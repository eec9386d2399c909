"""Scrape dinner candidates out of recipe search result pages.

Each recipe source has its own markup, so each gets its own extraction rule.
A rule finds the recipe cards on the page and pulls a link, a title and a
cook duration out of every card. Cards with missing parts are kept with empty
strings for what could not be found: a half-filled suggestion is more useful
to the user than none.
"""

from typing import Callable, Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from dinner_bot.models.models import Candidate
from dinner_bot.recipes.catalog import RecipeSource
from dinner_bot.utils.logger import logger


def parse_document(html: str) -> BeautifulSoup:
    """Parse raw search page markup into a queryable tree."""
    return BeautifulSoup(html, "html.parser")


def _clean(text: Optional[str]) -> str:
    if not text:
        return ""
    return " ".join(text.split())


def _first_text(element: Optional[Tag]) -> str:
    """First non-blank text node inside an element, or ""."""
    if element is None:
        return ""
    return _clean(next(element.stripped_strings, ""))


def _absolute_link(href, source: RecipeSource) -> str:
    if not href or not isinstance(href, str):
        return ""
    return urljoin(source.base_url + "/", href.strip())


def _extract_tine_card(card: Tag) -> Candidate:
    anchor = card.find("a", recursive=False)
    link = _absolute_link(anchor.get("href") if anchor else None, RecipeSource.TINE)

    # The title text sits in the first child of the title wrapper
    title_element = card.select_one(".a-card-title")
    title = ""
    if title_element is not None:
        title_child = title_element.find(True)
        title = _clean(title_child.get_text()) if title_child else _first_text(title_element)

    cook_duration = _first_text(card.select_one(".m-cook-time"))

    return Candidate(title=title, link=link, cook_duration=cook_duration)


def _extract_matprat_card(card: Tag) -> Candidate:
    anchor = card.select_one("a.recipe-search-result__link")
    link = _absolute_link(anchor.get("href") if anchor else None, RecipeSource.MATPRAT)

    title = _first_text(card.select_one(".recipe-search-result__title"))

    # Meta items also hold difficulty and servings; only the clock one is the duration
    cook_duration = ""
    for item in card.select(".recipe-search-result__meta-item"):
        if item.select_one(".icon-clock") is not None:
            cook_duration = _first_text(item)
            break

    return Candidate(title=title, link=link, cook_duration=cook_duration)


# source -> (card selector, per-card extraction)
EXTRACTION_RULES: dict[RecipeSource, tuple[str, Callable[[Tag], Candidate]]] = {
    RecipeSource.TINE: (".m-recipe-card", _extract_tine_card),
    RecipeSource.MATPRAT: (".recipe-search-result", _extract_matprat_card),
}


def extract_dinners(document: BeautifulSoup, source: RecipeSource) -> list[Candidate]:
    """Extract dinner candidates from a parsed search page.

    Args:
        document: Parsed search result page.
        source: Recipe source the page came from.

    Returns:
        Candidates in document order. Empty if nothing matched or the source
        has no extraction rule.
    """
    rule = EXTRACTION_RULES.get(source)
    if rule is None:
        logger.warning(f"No extraction rule for recipe source '{source}'")
        return []

    card_selector, extract_card = rule
    dinners = []
    for card in document.select(card_selector):
        candidate = extract_card(card)
        logger.debug(
            f"Scraped card: title='{candidate.title}' "
            f"cook_duration='{candidate.cook_duration}' link='{candidate.link}'"
        )
        dinners.append(candidate)

    logger.info(f"Found {len(dinners)} dinners")
    return dinners
