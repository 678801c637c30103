"""Base class for every conversational unit on the stack."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from dialogstack.core.constants import DialogTurnStatus
from dialogstack.core.types import DialogTurnResult

if TYPE_CHECKING:
    from dialogstack.dialogs.dialog_context import DialogContext


class Dialog(ABC):
    """A unit of conversational behaviour driven by a DialogContext.

    Every hook runs while the dialog's own frame is the top of the stack, so
    ``dc.state`` always refers to this dialog's private state. A hook returns
    WAITING when it needs the next user message and COMPLETE when it is done;
    the context pops completed frames and resumes the caller.

    Subclasses that never override ``continue_dialog`` end as soon as the user
    replies. This fail-soft default suits dialogs without partial progress;
    anything that waits for input across turns must override it.
    """

    end_of_turn: ClassVar[DialogTurnResult] = DialogTurnResult(DialogTurnStatus.WAITING)

    @abstractmethod
    async def begin_dialog(self, dc: "DialogContext", options: Any = None) -> DialogTurnResult:
        """Start the dialog on a freshly pushed frame."""
        ...

    async def continue_dialog(self, dc: "DialogContext") -> DialogTurnResult:
        """Handle a new user message while this dialog is active.

        Default: end the dialog without a result.
        """
        return DialogTurnResult(DialogTurnStatus.COMPLETE)

    async def resume_dialog(self, dc: "DialogContext", result: Any = None) -> DialogTurnResult:
        """Receive the result of a child dialog this one began.

        Default: end the dialog, handing the child's result to the caller.
        """
        return DialogTurnResult(DialogTurnStatus.COMPLETE, result)

    async def reprompt_dialog(self, dc: "DialogContext") -> DialogTurnResult:
        """Re-send the current prompt without changing state."""
        return self.end_of_turn

    async def cancel_dialog(self, dc: "DialogContext") -> DialogTurnResult:
        """Clean up before the frame is force-popped."""
        return DialogTurnResult(DialogTurnStatus.CANCELLED)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
