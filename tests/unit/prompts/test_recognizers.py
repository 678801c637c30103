"""Unit tests for recognizers."""

import pytest

from dialogstack.prompts.recognizers import ConfirmRecognizer, NumberRecognizer, TextRecognizer


class TestTextRecognizer:
    def test_strips_text(self, make_context):
        assert TextRecognizer().recognize(make_context("  Ada  ")) == "Ada"

    def test_blank_text_is_not_recognized(self, make_context):
        assert TextRecognizer().recognize(make_context("   ")) is None


class TestNumberRecognizer:
    @pytest.mark.parametrize(
        "text, locale, expected",
        [
            ("I am 35 years old", None, 35),
            ("1,234.5", "en-us", 1234.5),
            ("1.234,5", "de-de", 1234.5),
            ("-7", None, -7),
            ("abc", None, None),
        ],
    )
    def test_recognize(self, make_context, text, locale, expected):
        assert NumberRecognizer().recognize(make_context(text, locale)) == expected

    def test_default_locale_used_when_activity_has_none(self, make_context):
        recognizer = NumberRecognizer(default_locale="fr-fr")

        assert recognizer.recognize(make_context("2,5")) == 2.5

    def test_integral_values_are_ints(self, make_context):
        value = NumberRecognizer().recognize(make_context("40.0"))

        assert value == 40
        assert isinstance(value, int)


class TestConfirmRecognizer:
    @pytest.mark.parametrize(
        "text, locale, expected",
        [
            ("Yes please", None, True),
            ("nope", "en-us", False),
            ("nein", "de-de", False),
            ("oui", "fr-fr", True),
            ("maybe", None, None),
        ],
    )
    def test_recognize(self, make_context, text, locale, expected):
        assert ConfirmRecognizer().recognize(make_context(text, locale)) is expected


class TestNumberRecognizerLimits:
    def test_long_integers_keep_every_digit(self):
        value = NumberRecognizer.parse("12345678901234567891", "en")

        assert value == 12345678901234567891
        assert isinstance(value, int)

    def test_decimal_beyond_float_range_is_not_recognized(self):
        assert NumberRecognizer.parse("9" * 400 + ".5", "en") is None

    def test_integer_with_too_many_digits_is_not_recognized(self):
        assert NumberRecognizer.parse("9" * 5000, "en") is None

    def test_malformed_token_is_not_recognized(self):
        assert NumberRecognizer.parse("1.2.3", "en") is None
