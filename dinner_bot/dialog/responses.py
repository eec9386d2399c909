"""Builders for the three dialog actions the platform understands."""

from typing import Optional

from dinner_bot.models.models import (
    CloseAction,
    DelegateAction,
    DialogResponse,
    ElicitSlotAction,
    FulfillmentState,
    Message,
)


def elicit_slot(
    session_attributes: dict[str, str],
    intent_name: str,
    slots: dict[str, Optional[str]],
    slot_to_elicit: str,
    message: Message,
) -> DialogResponse:
    """Ask the user for a slot value again."""
    return DialogResponse(
        session_attributes=session_attributes,
        dialog_action=ElicitSlotAction(
            intent_name=intent_name,
            slots=slots,
            slot_to_elicit=slot_to_elicit,
            message=message,
        ),
    )


def close(
    session_attributes: dict[str, str],
    fulfillment_state: FulfillmentState,
    message: Message,
) -> DialogResponse:
    """End the conversation with a final message."""
    return DialogResponse(
        session_attributes=session_attributes,
        dialog_action=CloseAction(fulfillment_state=fulfillment_state, message=message),
    )


def delegate(session_attributes: dict[str, str], slots: dict[str, Optional[str]]) -> DialogResponse:
    """Let the platform choose the next step."""
    return DialogResponse(
        session_attributes=session_attributes,
        dialog_action=DelegateAction(slots=slots),
    )


def with_slot_cleared(slots: dict[str, Optional[str]], slot_name: str) -> dict[str, Optional[str]]:
    """Copy of slots with one slot set to None."""
    return {**slots, slot_name: None}
