"""Configuration management for the dinner suggestion webhook.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os

from dotenv import load_dotenv

from dinner_bot.recipes.catalog import RecipeSource


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Bot Name: events from any other bot are rejected before dispatch
        self.BOT_NAME: str = os.getenv("BOT_NAME", "SuggestDinner")
        # Intent Name: the only intent this code hook fulfils
        self.INTENT_NAME: str = os.getenv("INTENT_NAME", "Suggest_dinner")
        # Timezone applied to the process on every invocation.
        # User requests are treated as coming from this zone.
        self.TIMEZONE: str = os.getenv("TIMEZONE", "America/New_York")
        # Recipe source used at fulfilment when the RecipeLibrary slot is empty
        self.DEFAULT_RECIPE_SOURCE: str = os.getenv("DEFAULT_RECIPE_SOURCE", "tine").lower()
        # Total timeout (seconds) for the recipe website request. 0 disables it.
        self.HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", "10"))
        # Webhook Server Port
        self.PORT: int = int(os.getenv("PORT", "7777"))

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a required value is missing or out of range.
        """
        if not self.BOT_NAME:
            raise ValueError("BOT_NAME environment variable is required")
        if not self.INTENT_NAME:
            raise ValueError("INTENT_NAME environment variable is required")
        if self.DEFAULT_RECIPE_SOURCE not in [source.value for source in RecipeSource]:
            raise ValueError(
                f"DEFAULT_RECIPE_SOURCE must be one of "
                f"{[source.value for source in RecipeSource]}, got: {self.DEFAULT_RECIPE_SOURCE}"
            )
        if self.HTTP_TIMEOUT_SECONDS < 0:
            raise ValueError(
                f"HTTP_TIMEOUT_SECONDS must be 0 or greater, got: {self.HTTP_TIMEOUT_SECONDS}"
            )
        if not (1 <= self.PORT <= 65535):
            raise ValueError(f"PORT must be between 1 and 65535, got: {self.PORT}")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
