"""End-to-end run of the profile sample bot with a nested component."""

import pytest

from dialogstack.core.constants import INNER_STACK_KEY, DialogTurnStatus
from dialogstack.core.message_sink import BufferedMessageSink
from dialogstack.runtime.runner import DialogRunner
from dialogstack.runtime.store import LangGraphStackStore, MemoryStackStore
from dialogstack.samples.profile import build_profile_bot

pytestmark = pytest.mark.integration


@pytest.fixture(params=["memory", "langgraph"])
def store(request):
    return MemoryStackStore() if request.param == "memory" else LangGraphStackStore()


@pytest.mark.asyncio
async def test_profile_component_runs_on_its_own_stack(store):
    """
    GIVEN the profile bot
    WHEN the user provides a name and a phone number over two turns
    THEN the outer stack holds one component frame while the questions run
    AND the root receives the whole profile in a single resume
    """
    # Arrange
    runner = DialogRunner(build_profile_bot(), "root", store=store)
    sink = BufferedMessageSink()

    # Act
    await runner.process_message("hi", sink, "user1")
    outer = await store.load("user1")
    await runner.process_message("Ada", sink, "user1")
    final = await runner.process_message("555-0100", sink, "user1")

    # Assert
    assert [frame["id"] for frame in outer] == ["root", "profile"]
    inner = outer[1]["state"][INNER_STACK_KEY]
    assert [frame["id"] for frame in inner] == ["fill_profile", "name"]
    assert sink.texts == [
        "Welcome! We need to ask a few questions to get started.",
        "What's your name?",
        "What's your phone number?",
        "Thanks Ada! We'll call you at 555-0100.",
    ]
    assert final.status is DialogTurnStatus.COMPLETE
    assert final.result == {"name": "Ada", "phone": "555-0100"}
    assert await store.load("user1") == []


@pytest.mark.asyncio
async def test_cancel_inside_component_clears_everything(store):
    runner = DialogRunner(build_profile_bot(), "root", store=store)
    sink = BufferedMessageSink()
    await runner.process_message("hi", sink, "user1")
    await runner.process_message("Ada", sink, "user1")

    turn = await runner.cancel("user1", sink)

    assert turn.status is DialogTurnStatus.CANCELLED
    assert await store.load("user1") == []
