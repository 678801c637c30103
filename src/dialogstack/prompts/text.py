"""Prompt for free text."""

from dialogstack.core.validation import ValidatorFn
from dialogstack.prompts.prompt import Prompt
from dialogstack.prompts.recognizers import TextRecognizer


class TextPrompt(Prompt):
    """Prompts the user for any non-blank text."""

    def __init__(self, validator: ValidatorFn | str | None = None) -> None:
        super().__init__(TextRecognizer(), validator)
