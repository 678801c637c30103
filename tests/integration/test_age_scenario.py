"""End-to-end run of the age sample bot."""

import pytest

from dialogstack.core.constants import DialogTurnStatus
from dialogstack.core.message_sink import BufferedMessageSink
from dialogstack.runtime.runner import DialogRunner
from dialogstack.runtime.store import MemoryStackStore
from dialogstack.samples.profile import AGE_PROMPT, AGE_RETRY_PROMPT, build_age_bot

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_invalid_answers_are_retried_until_valid():
    """
    GIVEN the age bot waiting on its prompt
    WHEN the user answers "abc", "200" and then "35"
    THEN each invalid answer gets the retry prompt and the valid one is echoed
    """
    # Arrange
    store = MemoryStackStore()
    runner = DialogRunner(build_age_bot(), "root", store=store)
    sink = BufferedMessageSink()
    await runner.process_message("hi", sink, "user1")
    assert sink.texts == [AGE_PROMPT]
    sink.clear()

    # Act
    turns = [await runner.process_message(text, sink, "user1") for text in ["abc", "200", "35"]]

    # Assert
    assert sink.texts == [AGE_RETRY_PROMPT, AGE_RETRY_PROMPT, "age=35"]
    assert [turn.status for turn in turns] == [
        DialogTurnStatus.WAITING,
        DialogTurnStatus.WAITING,
        DialogTurnStatus.COMPLETE,
    ]
    assert turns[-1].result == 35
    assert await store.load("user1") == []


@pytest.mark.asyncio
async def test_conversation_restarts_after_completion():
    runner = DialogRunner(build_age_bot(), "root")
    sink = BufferedMessageSink()
    for text in ["hi", "40"]:
        await runner.process_message(text, sink, "user1")

    turn = await runner.process_message("again", sink, "user1")

    assert turn.status is DialogTurnStatus.WAITING
    assert sink.texts == [AGE_PROMPT, "age=40", AGE_PROMPT]


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["9" * 400, "9" * 400 + ".5", "9" * 5000])
async def test_oversized_numbers_get_the_retry_prompt(text):
    """
    GIVEN the age bot waiting on its prompt
    WHEN the user replies with a number far outside any numeric range
    THEN the reply is rejected with the retry prompt and the prompt keeps waiting
    """
    # Arrange
    runner = DialogRunner(build_age_bot(), "root")
    sink = BufferedMessageSink()
    await runner.process_message("hi", sink, "user1")
    sink.clear()

    # Act
    turn = await runner.process_message(text, sink, "user1")

    # Assert
    assert turn.status is DialogTurnStatus.WAITING
    assert sink.texts == [AGE_RETRY_PROMPT]
