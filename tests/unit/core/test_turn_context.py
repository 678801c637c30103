"""Unit tests for TurnContext."""

import pytest

from dialogstack.core.message_sink import BufferedMessageSink
from dialogstack.core.turn_context import Activity, TurnContext
from tests.mocks import FailingMessageSink


class TestLocale:
    def test_activity_locale_is_lowercased(self):
        context = TurnContext(Activity(locale="DE-de"), BufferedMessageSink())

        assert context.locale == "de-de"

    def test_default_locale_used_when_missing(self):
        context = TurnContext(Activity(), BufferedMessageSink(), default_locale="fr-FR")

        assert context.locale == "fr-fr"


class TestSend:
    @pytest.mark.asyncio
    async def test_send_delivers_and_counts(self):
        # Arrange
        sink = BufferedMessageSink()
        context = TurnContext(Activity(text="hi"), sink)

        # Act
        await context.send("Hello", speak="Hello there")

        # Assert
        assert sink.texts == ["Hello"]
        assert sink.messages[0].speak == "Hello there"
        assert context.sent_count == 1
        assert context.responded

    @pytest.mark.asyncio
    async def test_failed_send_propagates_and_is_not_counted(self):
        context = TurnContext(Activity(), FailingMessageSink())

        with pytest.raises(ConnectionError):
            await context.send("Hello")

        assert context.sent_count == 0
        assert not context.responded


@pytest.mark.asyncio
async def test_buffered_sink_clear():
    sink = BufferedMessageSink()
    context = TurnContext(Activity(), sink)
    await context.send("one")

    sink.clear()

    assert sink.messages == []
