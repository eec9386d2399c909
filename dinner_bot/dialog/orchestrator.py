"""Dialog orchestration for the Suggest_dinner intent.

Entry points, outermost first:
- handle_event: raw platform event (dict) in, serialized response out
- process_intent_request: timezone setup, bot name check, dispatch
- dispatch: routes on intent name
- suggest_dinner: validation in the dialog phase, search in the fulfilment phase

Every call produces exactly one DialogResponse or raises. Fetch failures and
empty result pages are answered with a polite Close; only a wrong bot name or
an unknown intent raises.
"""

import os
import time

from dinner_bot.dialog.responses import close, delegate, elicit_slot, with_slot_cleared
from dinner_bot.dialog.validation import (
    MAIN_INGREDIENT_SLOT,
    RECIPE_LIBRARY_SLOT,
    validate_suggest_dinner,
)
from dinner_bot.models.models import (
    Candidate,
    DialogResponse,
    FulfillmentState,
    IntentRequest,
    InvocationSource,
    Message,
)
from dinner_bot.recipes.catalog import RecipeSource, build_search_url, resolve_source
from dinner_bot.recipes.extractor import extract_dinners, parse_document
from dinner_bot.recipes.fetcher import fetch_search_page
from dinner_bot.utils.config import config
from dinner_bot.utils.errors import InvalidBotNameError, TransportError, UnsupportedIntentError
from dinner_bot.utils.logger import logger


NOT_FOUND_MESSAGE = "I could not find any dinners, sorry!"
TECHNICAL_ISSUE_MESSAGE = (
    "I encountered some technical issues when talking to the recipe library, "
    "so I can't help you now. Sorry!"
)


def format_suggestion(source: RecipeSource, dinner: Candidate) -> str:
    return (
        f"Thanks, {source.display_name} suggests that you make {dinner.title}. "
        f"It takes {dinner.cook_duration} to cook. "
        f"Link to recipe: {dinner.link}"
    )


def _validate_dialog(intent_request: IntentRequest) -> DialogResponse:
    slots = intent_request.slots
    validation_result = validate_suggest_dinner(
        slots.get(MAIN_INGREDIENT_SLOT),
        slots.get(RECIPE_LIBRARY_SLOT),
    )
    if not validation_result.is_valid:
        logger.info(f"Slot {validation_result.violated_slot} rejected, eliciting it again")
        return elicit_slot(
            intent_request.session_attributes,
            intent_request.intent_name,
            with_slot_cleared(slots, validation_result.violated_slot),
            validation_result.violated_slot,
            validation_result.message,
        )

    return delegate(intent_request.session_attributes, slots)


async def find_dinner(intent_request: IntentRequest) -> DialogResponse:
    """Search the recipe source and answer with the first dinner found."""
    slots = intent_request.slots
    main_ingredient = slots.get(MAIN_INGREDIENT_SLOT)
    recipe_library = (slots.get(RECIPE_LIBRARY_SLOT) or config.DEFAULT_RECIPE_SOURCE).lower()

    source = resolve_source(recipe_library)
    url = build_search_url(main_ingredient, source)
    logger.info(
        f"Searching {source.display_name} for main ingredient {main_ingredient!r}",
        extra={"user_id": intent_request.user_id, "recipe_source": source.value},
    )

    try:
        html = await fetch_search_page(url)
    except TransportError:
        return close(
            intent_request.session_attributes,
            FulfillmentState.FULFILLED,
            Message(content=TECHNICAL_ISSUE_MESSAGE),
        )

    dinners = extract_dinners(parse_document(html), source)
    if not dinners:
        return close(
            intent_request.session_attributes,
            FulfillmentState.FULFILLED,
            Message(content=NOT_FOUND_MESSAGE),
        )

    return close(
        intent_request.session_attributes,
        FulfillmentState.FULFILLED,
        Message(content=format_suggestion(source, dinners[0])),
    )


async def suggest_dinner(intent_request: IntentRequest) -> DialogResponse:
    """Handle the Suggest_dinner intent in either invocation phase."""
    if intent_request.invocation_source == InvocationSource.DIALOG:
        return _validate_dialog(intent_request)
    return await find_dinner(intent_request)


async def dispatch(intent_request: IntentRequest) -> DialogResponse:
    """Route the request to the handler for its intent.

    Raises:
        UnsupportedIntentError: If the intent is not served by this hook.
    """
    intent_name = intent_request.intent_name
    logger.info(
        f"dispatch userId={intent_request.user_id}, intentName={intent_name}",
        extra={"user_id": intent_request.user_id, "intent_name": intent_name},
    )

    if intent_name == config.INTENT_NAME:
        return await suggest_dinner(intent_request)
    raise UnsupportedIntentError(intent_name)


def apply_timezone(timezone: str) -> None:
    """Treat user requests as coming from the configured time zone."""
    os.environ["TZ"] = timezone
    if hasattr(time, "tzset"):
        time.tzset()


async def process_intent_request(intent_request: IntentRequest) -> DialogResponse:
    """Check the bot name and dispatch.

    Raises:
        InvalidBotNameError: If the event came from another bot.
        UnsupportedIntentError: If the intent is not served by this hook.
    """
    apply_timezone(config.TIMEZONE)
    logger.info(f"event.bot.name={intent_request.bot.name}")

    if intent_request.bot.name != config.BOT_NAME:
        raise InvalidBotNameError(intent_request.bot.name, config.BOT_NAME)

    return await dispatch(intent_request)


async def handle_event(event: dict) -> dict:
    """Validate a raw platform event, process it and serialize the response.

    Raises:
        pydantic.ValidationError: If the event is malformed.
        InvalidBotNameError: If the event came from another bot.
        UnsupportedIntentError: If the intent is not served by this hook.
    """
    intent_request = IntentRequest.model_validate(event)
    response = await process_intent_request(intent_request)
    return response.to_lex()
