"""Prompt for dates and times."""

from typing import Any

from dialogstack.core.validation import ValidatorFn
from dialogstack.prompts.prompt import Prompt
from dialogstack.prompts.recognizers import DatetimeRecognizer


class DatetimePrompt(Prompt):
    """Prompts the user to enter a date and/or time.

    By default the caller receives a list of FoundDatetime. A validator can
    turn it into whatever the caller needs, for example:

        async def future_only(context, values):
            if values and values[0].value > datetime.now():
                return values[0].value
            await context.send('Answer with a time in the future like "tomorrow at 9am".')
            return None

        dialogs.add("alarm", DatetimePrompt(future_only))

    Args:
        validator: Optional validator run on every reply.
        default_locale: Locale used when the activity carries none.
        settings: Extra dateparser settings passed to the recognizer.
    """

    def __init__(
        self,
        validator: ValidatorFn | str | None = None,
        default_locale: str | None = None,
        settings: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(DatetimeRecognizer(default_locale, settings), validator)
