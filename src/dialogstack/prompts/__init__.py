"""Prompt dialogs and their recognizers."""

from dialogstack.prompts.confirm import ConfirmPrompt
from dialogstack.prompts.datetime import DatetimePrompt
from dialogstack.prompts.number import NumberPrompt
from dialogstack.prompts.prompt import Prompt
from dialogstack.prompts.recognizers import (
    ConfirmRecognizer,
    DatetimeRecognizer,
    FoundDatetime,
    NumberRecognizer,
    Recognizer,
    TextRecognizer,
)
from dialogstack.prompts.text import TextPrompt

__all__ = [
    "ConfirmPrompt",
    "ConfirmRecognizer",
    "DatetimePrompt",
    "DatetimeRecognizer",
    "FoundDatetime",
    "NumberPrompt",
    "NumberRecognizer",
    "Prompt",
    "Recognizer",
    "TextPrompt",
    "TextRecognizer",
]
