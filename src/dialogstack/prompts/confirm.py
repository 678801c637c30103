"""Prompt for yes/no answers."""

from dialogstack.core.validation import ValidatorFn
from dialogstack.prompts.prompt import Prompt
from dialogstack.prompts.recognizers import ConfirmRecognizer


class ConfirmPrompt(Prompt):
    """Prompts the user to answer yes or no; returns a bool."""

    def __init__(
        self,
        validator: ValidatorFn | str | None = None,
        default_locale: str | None = None,
    ) -> None:
        super().__init__(ConfirmRecognizer(default_locale), validator)
