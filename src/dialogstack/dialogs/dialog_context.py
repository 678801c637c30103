"""Dialog stack walker.

A DialogContext is built fresh for every turn over the stack loaded from
persistence. It pushes frames on begin, pops them on end and cancel, and
carries results from completed frames to their callers.
"""

import logging
from typing import TYPE_CHECKING, Any

from dialogstack.core.constants import DialogTurnStatus
from dialogstack.core.errors import DialogNotFoundError, DialogStackError
from dialogstack.core.turn_context import TurnContext
from dialogstack.core.types import (
    DialogInstance,
    DialogStack,
    DialogState,
    DialogTurnResult,
    PromptOptions,
)
from dialogstack.dialogs.dialog import Dialog

if TYPE_CHECKING:
    from dialogstack.dialogs.dialog_set import DialogSet

logger = logging.getLogger(__name__)


class DialogContext:
    """Drives begin/continue/resume/end/cancel over one conversation's stack.

    The stack list is mutated in place, so the caller that loaded it can
    persist it once the turn settles.

    Cascading completion: when a hook reports COMPLETE while its own frame is
    still the top of the stack, the frame is popped and the parent's
    ``resume_dialog`` receives the result, repeatedly, until some frame waits
    or the stack is empty. Each step removes one frame, so the walk ends.
    A hook that already ended itself through ``end_dialog`` returns a settled
    result that is passed through as is.
    """

    def __init__(self, dialogs: "DialogSet", context: TurnContext, stack: DialogStack) -> None:
        self.dialogs = dialogs
        self.context = context
        self.stack = stack

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def active_dialog(self) -> DialogInstance | None:
        """The frame on top of the stack, if any."""
        if not self.stack:
            return None
        return self.stack[-1]

    @property
    def state(self) -> DialogState:
        """Private state of the active frame.

        Raises:
            DialogStackError: If no dialog is active.
        """
        instance = self.active_dialog
        if instance is None:
            raise DialogStackError("No active dialog to read state from")
        return DialogState(instance)

    @property
    def depth(self) -> int:
        return len(self.stack)

    # ------------------------------------------------------------------
    # Stack operations
    # ------------------------------------------------------------------

    async def begin_dialog(self, dialog_id: str, options: Any = None) -> DialogTurnResult:
        """Push a new frame for ``dialog_id`` and start it.

        Raises:
            DialogNotFoundError: If the id is not registered.
        """
        dialog = self._find(dialog_id)
        instance: DialogInstance = {"id": dialog_id, "state": {}}
        self.stack.append(instance)
        logger.debug(
            f"Begin dialog '{dialog_id}'",
            extra={"dialog_id": dialog_id, "depth": self.depth},
        )

        turn = await dialog.begin_dialog(self, options)
        return await self._settle(instance, turn)

    async def prompt(
        self,
        dialog_id: str,
        prompt: PromptOptions | str | None = None,
        retry_prompt: str | None = None,
        speak: str | None = None,
        retry_speak: str | None = None,
    ) -> DialogTurnResult:
        """Begin a prompt dialog with the given output variants."""
        if isinstance(prompt, PromptOptions):
            options = prompt
        else:
            options = PromptOptions(
                prompt=prompt,
                retry_prompt=retry_prompt,
                speak=speak,
                retry_speak=retry_speak,
            )
        return await self.begin_dialog(dialog_id, options)

    async def continue_dialog(self) -> DialogTurnResult:
        """Hand the current user message to the active dialog.

        Returns EMPTY without touching the stack when nothing is running;
        starting a dialog is always left to the caller.
        """
        instance = self.active_dialog
        if instance is None:
            return DialogTurnResult(DialogTurnStatus.EMPTY)

        dialog = self._find(instance["id"])
        turn = await dialog.continue_dialog(self)
        return await self._settle(instance, turn)

    async def end_dialog(self, result: Any = None) -> DialogTurnResult:
        """Pop the active frame and resume its caller with ``result``.

        Returns COMPLETE with the result once the stack is empty.

        Raises:
            DialogStackError: If the stack is empty.
        """
        if not self.stack:
            raise DialogStackError("Cannot end a dialog on an empty stack")

        popped = self.stack.pop()
        logger.debug(
            f"End dialog '{popped['id']}'",
            extra={"dialog_id": popped["id"], "depth": self.depth},
        )

        parent = self.active_dialog
        if parent is None:
            return DialogTurnResult(DialogTurnStatus.COMPLETE, result)

        dialog = self._find(parent["id"])
        turn = await dialog.resume_dialog(self, result)
        return await self._settle(parent, turn)

    async def replace_dialog(self, dialog_id: str, options: Any = None) -> DialogTurnResult:
        """Swap the active frame for a new dialog without resuming the caller."""
        if self.stack:
            popped = self.stack.pop()
            logger.debug(
                f"Replace dialog '{popped['id']}' with '{dialog_id}'",
                extra={"dialog_id": dialog_id, "depth": self.depth},
            )
        return await self.begin_dialog(dialog_id, options)

    async def cancel_all_dialogs(self) -> DialogTurnResult:
        """Cancel every frame from top to bottom and clear the stack."""
        if not self.stack:
            return DialogTurnResult(DialogTurnStatus.EMPTY)

        while self.stack:
            instance = self.stack[-1]
            dialog = self._find(instance["id"])
            await dialog.cancel_dialog(self)
            # The hook may not pop; only remove the frame if it is still on top
            if self.stack and self.stack[-1] is instance:
                self.stack.pop()
            logger.debug(
                f"Cancelled dialog '{instance['id']}'",
                extra={"dialog_id": instance["id"], "depth": self.depth},
            )

        return DialogTurnResult(DialogTurnStatus.CANCELLED)

    async def reprompt_dialog(self) -> DialogTurnResult:
        """Ask the active dialog to re-send its prompt."""
        instance = self.active_dialog
        if instance is None:
            return DialogTurnResult(DialogTurnStatus.EMPTY)

        dialog = self._find(instance["id"])
        return await dialog.reprompt_dialog(self)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _find(self, dialog_id: str) -> Dialog:
        dialog = self.dialogs.find(dialog_id)
        if dialog is None:
            raise DialogNotFoundError(
                f"Dialog '{dialog_id}' not found",
                dialog_id=dialog_id,
                available=self.dialogs.ids(),
            )
        return dialog

    async def _settle(self, instance: DialogInstance, turn: DialogTurnResult) -> DialogTurnResult:
        if turn.status is DialogTurnStatus.COMPLETE and self.active_dialog is instance:
            return await self.end_dialog(turn.result)
        return turn
