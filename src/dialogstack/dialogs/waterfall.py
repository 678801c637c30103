"""Waterfall dialogs: ordered steps, each resuming from the previous result."""

import inspect
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Any

from dialogstack.core.constants import STEP_INDEX_KEY, DialogTurnStatus
from dialogstack.core.errors import ConfigError
from dialogstack.core.types import DialogTurnResult
from dialogstack.dialogs.dialog import Dialog

if TYPE_CHECKING:
    from dialogstack.dialogs.dialog_context import DialogContext

logger = logging.getLogger(__name__)

WaterfallStep = Callable[
    ["DialogContext", Any],
    Awaitable[DialogTurnResult | None] | DialogTurnResult | None,
]


class WaterfallDialog(Dialog):
    """Runs a fixed sequence of steps.

    The first step receives the begin options, later steps receive the result
    of the child dialog the previous step began, or the user's text when the
    previous step simply waited. Steps should return the result of the
    context call they finish with (``prompt``, ``begin_dialog``,
    ``end_dialog``); returning None means "wait for the next message".

    Steps keep their own values in ``dc.state``; ``_step_index`` is reserved.

    Usage:
        async def ask_age(dc, options):
            return await dc.prompt("age", "How old are you?")

        async def show_age(dc, age):
            await dc.context.send(f"age={age}")
            return await dc.end_dialog(age)

        dialogs.add("root", [ask_age, show_age])
    """

    def __init__(self, steps: Sequence[WaterfallStep]) -> None:
        if not steps:
            raise ConfigError("A waterfall needs at least one step")
        self.steps = list(steps)

    async def begin_dialog(self, dc: "DialogContext", options: Any = None) -> DialogTurnResult:
        return await self._run_step(dc, 0, options)

    async def continue_dialog(self, dc: "DialogContext") -> DialogTurnResult:
        return await self._run_step(dc, dc.state[STEP_INDEX_KEY] + 1, dc.context.text)

    async def resume_dialog(self, dc: "DialogContext", result: Any = None) -> DialogTurnResult:
        return await self._run_step(dc, dc.state[STEP_INDEX_KEY] + 1, result)

    async def _run_step(self, dc: "DialogContext", index: int, result: Any) -> DialogTurnResult:
        if index >= len(self.steps):
            return DialogTurnResult(DialogTurnStatus.COMPLETE, result)

        dc.state[STEP_INDEX_KEY] = index
        step = self.steps[index]
        logger.debug(
            f"Running waterfall step {index} ({getattr(step, '__name__', 'step')})",
            extra={"step_index": index, "depth": dc.depth},
        )

        outcome = step(dc, result)
        if inspect.isawaitable(outcome):
            outcome = await outcome
        return outcome or self.end_of_turn

    def __repr__(self) -> str:
        return f"WaterfallDialog(steps={len(self.steps)})"
