"""Prompt for numbers."""

from dialogstack.core.validation import ValidatorFn
from dialogstack.prompts.prompt import Prompt
from dialogstack.prompts.recognizers import NumberRecognizer


class NumberPrompt(Prompt):
    """Prompts the user to enter a number.

    By default the caller receives the first number found in the reply. A
    validator can narrow or reshape it, for example:

        async def age_validator(context, value):
            if value is not None and 1 <= value <= 110:
                return int(value)
            await context.send("Please enter a number between 1 and 110.")
            return None

        dialogs.add("age", NumberPrompt(age_validator))

    Args:
        validator: Optional validator run on every reply. If it sends a
            message no additional retry prompt is sent.
        default_locale: Locale used when the activity carries none.
    """

    def __init__(
        self,
        validator: ValidatorFn | str | None = None,
        default_locale: str | None = None,
    ) -> None:
        super().__init__(NumberRecognizer(default_locale), validator)
