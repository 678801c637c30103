"""Core constants and enums."""

from enum import Enum


class DialogTurnStatus(str, Enum):
    """Outcome of driving the stack for one turn."""

    EMPTY = "empty"
    WAITING = "waiting"
    COMPLETE = "complete"
    CANCELLED = "cancelled"


# Reserved keys inside DialogInstance.state
OPTIONS_KEY = "_options"
STEP_INDEX_KEY = "_step_index"
INNER_STACK_KEY = "_dialog_stack"

DEFAULT_LOCALE = "en-us"
