"""Recognizers that turn the raw user text into typed candidate values.

A recognizer is any object with a ``recognize(context)`` method returning the
recognized value, or None when nothing usable was found. It may be async.
"""

import logging
import math
import re
from datetime import datetime
from typing import Any, Protocol

from dateparser.search import search_dates
from pydantic import BaseModel, ConfigDict, Field

from dialogstack.core.turn_context import TurnContext

logger = logging.getLogger(__name__)

# Locales whose decimal separator is a comma
_DECIMAL_COMMA_LANGUAGES = frozenset({"de", "es", "fr", "it", "nl", "pt"})

_NUMBER_PATTERN = re.compile(r"[-+]?\d+(?:[.,]\d+)*")

_CONFIRM_WORDS: dict[str, dict[str, bool]] = {
    "en": {
        "yes": True,
        "y": True,
        "yeah": True,
        "yep": True,
        "sure": True,
        "ok": True,
        "no": False,
        "n": False,
        "nope": False,
    },
    "es": {"si": True, "sí": True, "vale": True, "claro": True, "no": False},
    "fr": {"oui": True, "ouais": True, "non": False},
    "de": {"ja": True, "jawohl": True, "nein": False},
}


class Recognizer(Protocol):
    """Interface for recognizers (DIP)."""

    def recognize(self, context: TurnContext) -> Any:
        ...


class LocaleAwareRecognizer:
    """Base for recognizers whose rules depend on the user's language."""

    def __init__(self, default_locale: str | None = None) -> None:
        self.default_locale = default_locale

    def language(self, context: TurnContext) -> str:
        locale = context.activity.locale or self.default_locale or context.locale
        return locale.lower().split("-")[0]


class TextRecognizer:
    """Accepts any non-blank text, stripped."""

    def recognize(self, context: TurnContext) -> str | None:
        text = context.text.strip()
        return text or None


class NumberRecognizer(LocaleAwareRecognizer):
    """Finds the first number in the text.

    Returns an int when the number has no fractional part, a float otherwise.
    Integers are parsed exactly; non-finite floats are not recognized.
    """

    def recognize(self, context: TurnContext) -> int | float | None:
        match = _NUMBER_PATTERN.search(context.text)
        if match is None:
            return None
        return self.parse(match.group(0), self.language(context))

    @staticmethod
    def parse(token: str, language: str) -> int | float | None:
        if language in _DECIMAL_COMMA_LANGUAGES:
            token = token.replace(".", "").replace(",", ".")
        else:
            token = token.replace(",", "")
        whole, _, fraction = token.partition(".")
        try:
            if not fraction.strip("0"):
                return int(whole)
            value = float(token)
        except ValueError:
            # malformed token or more digits than int() accepts
            return None
        return value if math.isfinite(value) else None


class ConfirmRecognizer(LocaleAwareRecognizer):
    """Maps yes/no words to True/False."""

    def recognize(self, context: TurnContext) -> bool | None:
        words = _CONFIRM_WORDS.get(self.language(context), _CONFIRM_WORDS["en"])
        for token in re.findall(r"\w+", context.text.lower()):
            if token in words:
                return words[token]
        return None


class FoundDatetime(BaseModel):
    """A date or time expression found in the user's reply."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Part of the reply the value was read from")
    value: datetime = Field(description="Resolved date and time")


class DatetimeRecognizer(LocaleAwareRecognizer):
    """Finds every date/time expression in the text with dateparser.

    Relative expressions ("tomorrow at 9am") resolve against now unless
    ``RELATIVE_BASE`` is given in ``settings``. Returns the expressions in
    the order they appear, or None when there are none.

    Args:
        default_locale: Locale used when the activity carries none.
        settings: Extra dateparser settings, e.g. ``{"PREFER_DATES_FROM": "future"}``.
    """

    def __init__(
        self,
        default_locale: str | None = None,
        settings: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(default_locale)
        self.settings = dict(settings or {})

    def recognize(self, context: TurnContext) -> list[FoundDatetime] | None:
        text = context.text.strip()
        if not text:
            return None
        language = self.language(context)
        try:
            matches = search_dates(text, languages=[language], settings=self.settings)
        except ValueError:
            logger.debug(
                f"dateparser has no rules for '{language}', detecting language instead",
                extra={"language": language},
            )
            matches = search_dates(text, settings=self.settings)
        if not matches:
            return None
        return [FoundDatetime(text=found, value=value) for found, value in matches]
