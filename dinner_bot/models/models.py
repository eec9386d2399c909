"""Data models for the dinner suggestion webhook.

Pydantic v2 models for the bot platform's code hook events and dialog
responses, plus the domain objects passed between pipeline stages. Wire
fields are camelCase; Python attributes are snake_case.
"""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


class InvocationSource(str, Enum):
    """Phase of the dialog the code hook is invoked in."""

    DIALOG = "DialogCodeHook"
    FULFILLMENT = "FulfillmentCodeHook"


class FulfillmentState(str, Enum):
    FULFILLED = "Fulfilled"
    FAILED = "Failed"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Message(_CamelModel):
    """Plain text message shown (or spoken) to the user."""

    content_type: Literal["PlainText"] = "PlainText"
    content: str


class Bot(_CamelModel):
    name: str
    alias: Optional[str] = None
    version: Optional[str] = None


class CurrentIntent(_CamelModel):
    name: str
    slots: dict[str, Optional[str]] = Field(default_factory=dict)
    confirmation_status: Optional[str] = None

    @field_validator("slots", mode="before")
    @classmethod
    def default_slots(cls, slots):
        return slots or {}


class IntentRequest(_CamelModel):
    """Code hook event sent by the bot platform.

    Only invocationSource, sessionAttributes, currentIntent and bot are used
    for decisions; the rest is carried for logging.
    """

    message_version: Optional[str] = None
    invocation_source: InvocationSource
    user_id: Optional[str] = None
    session_attributes: dict[str, str] = Field(default_factory=dict)
    request_attributes: Optional[dict[str, str]] = None
    bot: Bot
    output_dialog_mode: Optional[str] = None
    current_intent: CurrentIntent
    input_transcript: Optional[str] = None

    @field_validator("session_attributes", mode="before")
    @classmethod
    def default_session_attributes(cls, attributes):
        # The platform sends null before anything has been stored
        return attributes or {}

    @property
    def intent_name(self) -> str:
        return self.current_intent.name

    @property
    def slots(self) -> dict[str, Optional[str]]:
        return self.current_intent.slots


class ValidationResult(BaseModel):
    """Outcome of slot validation.

    violated_slot and message are set exactly when is_valid is False.
    """

    is_valid: bool
    violated_slot: Optional[str] = None
    message: Optional[Message] = None

    @model_validator(mode="after")
    def check_violation_fields(self) -> "ValidationResult":
        has_violation = self.violated_slot is not None and self.message is not None
        has_any = self.violated_slot is not None or self.message is not None
        if self.is_valid and has_any:
            raise ValueError("A valid result cannot carry a violated slot or message")
        if not self.is_valid and not has_violation:
            raise ValueError("An invalid result needs both violated_slot and message")
        return self


class Candidate(BaseModel):
    """One dinner scraped from a recipe search page."""

    model_config = ConfigDict(frozen=True)

    title: str = ""
    link: str = ""
    cook_duration: str = ""


class ElicitSlotAction(_CamelModel):
    type: Literal["ElicitSlot"] = "ElicitSlot"
    intent_name: str
    slots: dict[str, Optional[str]]
    slot_to_elicit: str
    message: Message


class CloseAction(_CamelModel):
    type: Literal["Close"] = "Close"
    fulfillment_state: FulfillmentState
    message: Message


class DelegateAction(_CamelModel):
    type: Literal["Delegate"] = "Delegate"
    slots: dict[str, Optional[str]]


DialogAction = Annotated[
    Union[ElicitSlotAction, CloseAction, DelegateAction],
    Field(discriminator="type"),
]


class DialogResponse(_CamelModel):
    """Response returned to the bot platform.

    Exactly one dialog action per invocation.
    """

    session_attributes: dict[str, str] = Field(default_factory=dict)
    dialog_action: DialogAction

    def to_lex(self) -> dict:
        """Serialize to the platform's JSON shape."""
        return self.model_dump(mode="json", by_alias=True)
