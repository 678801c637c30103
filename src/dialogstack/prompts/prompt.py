"""Generic prompt: ask, wait one turn, validate, retry or return."""

import inspect
import logging
from typing import TYPE_CHECKING, Any

import pydantic

from dialogstack.core.constants import OPTIONS_KEY, DialogTurnStatus
from dialogstack.core.errors import PromptError
from dialogstack.core.types import DialogTurnResult, PromptOptions
from dialogstack.core.validation import ValidatorFn, resolve_validator, run_validator
from dialogstack.dialogs.dialog import Dialog
from dialogstack.prompts.recognizers import Recognizer

if TYPE_CHECKING:
    from dialogstack.dialogs.dialog_context import DialogContext

logger = logging.getLogger(__name__)


class Prompt(Dialog):
    """Asks the user for a value and keeps asking until one is accepted.

    On begin the prompt text is sent and the dialog waits. Each reply is run
    through the recognizer and then the optional validator. A None outcome
    re-sends the retry prompt (or the prompt itself when no retry text was
    given) and keeps waiting; there is no attempt limit. If the validator
    sent its own message during the attempt, the retry prompt is skipped.

    Args:
        recognizer: Turns the user's text into a candidate value.
        validator: Callable or registered validator name. Receives the turn
            context and the candidate, returns the accepted value or None.
    """

    def __init__(self, recognizer: Recognizer, validator: ValidatorFn | str | None = None) -> None:
        self.recognizer = recognizer
        self.validator = resolve_validator(validator)

    async def begin_dialog(self, dc: "DialogContext", options: Any = None) -> DialogTurnResult:
        try:
            prompt_options = PromptOptions.coerce(options)
        except pydantic.ValidationError as e:
            raise PromptError("Invalid prompt options", error=e) from e
        if prompt_options.prompt is None and prompt_options.retry_prompt is None:
            raise PromptError("A prompt needs prompt or retry_prompt text")

        dc.state[OPTIONS_KEY] = prompt_options.model_dump()
        await self.on_prompt(dc, prompt_options, is_retry=False)
        return self.end_of_turn

    async def continue_dialog(self, dc: "DialogContext") -> DialogTurnResult:
        options = self._options(dc)
        sent_before = dc.context.sent_count

        value = await self.on_recognize(dc, options)
        if self.validator is not None:
            value = await run_validator(self.validator, dc.context, value)

        if value is not None:
            return DialogTurnResult(DialogTurnStatus.COMPLETE, value)

        logger.debug(
            "Prompt input rejected",
            extra={"depth": dc.depth, "validator_replied": dc.context.sent_count > sent_before},
        )
        if dc.context.sent_count == sent_before:
            await self.on_prompt(dc, options, is_retry=True)
        return self.end_of_turn

    async def reprompt_dialog(self, dc: "DialogContext") -> DialogTurnResult:
        await self.on_prompt(dc, self._options(dc), is_retry=False)
        return self.end_of_turn

    async def on_prompt(self, dc: "DialogContext", options: PromptOptions, is_retry: bool) -> None:
        """Send the prompt, or the retry prompt after a rejection."""
        if is_retry and options.retry_prompt:
            await dc.context.send(options.retry_prompt, options.retry_speak)
        elif options.prompt:
            await dc.context.send(options.prompt, options.speak)

    async def on_recognize(self, dc: "DialogContext", options: PromptOptions) -> Any:
        result = self.recognizer.recognize(dc.context)
        if inspect.isawaitable(result):
            return await result
        return result

    def _options(self, dc: "DialogContext") -> PromptOptions:
        return PromptOptions.model_validate(dc.state.get(OPTIONS_KEY, {}))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(recognizer={type(self.recognizer).__name__})"
