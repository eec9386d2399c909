"""Exception hierarchy for the dinner suggestion webhook.

Validation problems are not exceptions: they come back as ValidationResult
values and turn into ElicitSlot re-prompts. The classes below cover the
failures that leave the normal dialog flow.
"""


class DinnerBotError(Exception):
    """Base exception for the dinner suggestion webhook."""


class UnsupportedSourceError(DinnerBotError, ValueError):
    """Raised when a recipe source outside the supported set is requested."""

    def __init__(self, source):
        self.source = source
        super().__init__(f"Recipe source '{source}' is not supported")


class TransportError(DinnerBotError):
    """Raised when the recipe website cannot be fetched."""

    def __init__(self, url: str, error: str):
        self.url = url
        self.error = error
        super().__init__(f"Request to {url} failed: {error}")


class UnsupportedIntentError(DinnerBotError):
    """Raised when the platform dispatches an intent this hook does not serve."""

    def __init__(self, intent_name: str):
        self.intent_name = intent_name
        super().__init__(f"Intent with name {intent_name} not supported")


class InvalidBotNameError(DinnerBotError):
    """Raised when the event was sent by a bot other than the configured one."""

    def __init__(self, bot_name: str, expected: str):
        self.bot_name = bot_name
        self.expected = expected
        super().__init__(f"Invalid Bot Name: expected '{expected}', got '{bot_name}'")
