"""Dialogs that own a private sub-stack."""

import logging
from collections.abc import Sequence
from typing import Any

from dialogstack.core.constants import INNER_STACK_KEY, DialogTurnStatus
from dialogstack.core.types import DialogTurnResult
from dialogstack.dialogs.dialog import Dialog
from dialogstack.dialogs.dialog_context import DialogContext
from dialogstack.dialogs.dialog_set import DialogSet
from dialogstack.dialogs.waterfall import WaterfallStep

logger = logging.getLogger(__name__)


class DialogContainer(Dialog):
    """A reusable component presented to its caller as a single dialog.

    The container registers its own dialogs and keeps their stack inside its
    frame's state, so ids used inside never clash with ids of the outer
    stack. When the inner stack completes, the container completes with the
    inner result.

    Usage:
        class ProfileDialog(DialogContainer):
            def __init__(self):
                super().__init__("fill_profile")
                self.add("fill_profile", [ask_name, ask_phone, finish])
                self.add("text", TextPrompt())

        dialogs.add("profile", ProfileDialog())
    """

    def __init__(self, initial_dialog_id: str, dialogs: DialogSet | None = None) -> None:
        self.initial_dialog_id = initial_dialog_id
        self.dialogs = dialogs or DialogSet()

    def add(self, dialog_id: str, dialog: Dialog | Sequence[WaterfallStep]) -> Dialog:
        """Register a dialog in the container's private set."""
        return self.dialogs.add(dialog_id, dialog)

    def find(self, dialog_id: str) -> Dialog | None:
        return self.dialogs.find(dialog_id)

    def create_context(self, dc: DialogContext) -> DialogContext:
        """Build the inner context over the stack stored in this frame."""
        inner_stack = dc.state.setdefault(INNER_STACK_KEY, [])
        return DialogContext(self.dialogs, dc.context, inner_stack)

    async def begin_dialog(self, dc: DialogContext, options: Any = None) -> DialogTurnResult:
        inner = self.create_context(dc)
        turn = await self.on_begin(inner, options)
        return self._outer_result(turn)

    async def continue_dialog(self, dc: DialogContext) -> DialogTurnResult:
        inner = self.create_context(dc)
        turn = await self.on_continue(inner)
        return self._outer_result(turn)

    async def resume_dialog(self, dc: DialogContext, result: Any = None) -> DialogTurnResult:
        # Only reached if something was pushed on the outer stack above us
        inner = self.create_context(dc)
        turn = await self.on_continue(inner)
        return self._outer_result(turn)

    async def reprompt_dialog(self, dc: DialogContext) -> DialogTurnResult:
        inner = self.create_context(dc)
        await inner.reprompt_dialog()
        return self.end_of_turn

    async def cancel_dialog(self, dc: DialogContext) -> DialogTurnResult:
        inner = self.create_context(dc)
        logger.debug(
            "Cancelling container sub-stack",
            extra={"dialog_id": self.initial_dialog_id, "depth": inner.depth},
        )
        return await inner.cancel_all_dialogs()

    async def on_begin(self, inner: DialogContext, options: Any = None) -> DialogTurnResult:
        """Start the initial dialog. Override to pick it dynamically."""
        return await inner.begin_dialog(self.initial_dialog_id, options)

    async def on_continue(self, inner: DialogContext) -> DialogTurnResult:
        return await inner.continue_dialog()

    def _outer_result(self, turn: DialogTurnResult) -> DialogTurnResult:
        if turn.status in (DialogTurnStatus.COMPLETE, DialogTurnStatus.EMPTY):
            return DialogTurnResult(DialogTurnStatus.COMPLETE, turn.result)
        return self.end_of_turn

    def __repr__(self) -> str:
        return f"{type(self).__name__}(initial_dialog_id={self.initial_dialog_id!r})"
