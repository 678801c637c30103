"""Core domain types and infrastructure."""

from dialogstack.core.constants import DialogTurnStatus
from dialogstack.core.message_sink import BufferedMessageSink, MessageSink, OutboundMessage
from dialogstack.core.turn_context import Activity, TurnContext
from dialogstack.core.types import (
    DialogInstance,
    DialogStack,
    DialogState,
    DialogTurnResult,
    PromptOptions,
)

__all__ = [
    "Activity",
    "BufferedMessageSink",
    "DialogInstance",
    "DialogStack",
    "DialogState",
    "DialogTurnResult",
    "DialogTurnStatus",
    "MessageSink",
    "OutboundMessage",
    "PromptOptions",
    "TurnContext",
]
