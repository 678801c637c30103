"""Shared fixtures for dialogstack tests.

Dialog hooks are exercised through real DialogContext instances built over
plain list stacks, so every test can inspect the stack directly.
"""

from collections.abc import Callable

import pytest

from dialogstack.core.message_sink import BufferedMessageSink
from dialogstack.core.turn_context import Activity, TurnContext
from dialogstack.core.types import DialogStack
from dialogstack.dialogs.dialog_context import DialogContext
from dialogstack.dialogs.dialog_set import DialogSet


@pytest.fixture
def sink() -> BufferedMessageSink:
    return BufferedMessageSink()


@pytest.fixture
def make_context(sink: BufferedMessageSink) -> Callable[..., TurnContext]:
    """Build a TurnContext for one inbound message sharing the test sink."""

    def _make(text: str = "", locale: str | None = None) -> TurnContext:
        return TurnContext(Activity(text=text, locale=locale), sink)

    return _make


@pytest.fixture
def make_dc(make_context: Callable[..., TurnContext]) -> Callable[..., DialogContext]:
    """Build a DialogContext for one turn over an existing stack."""

    def _make(
        dialogs: DialogSet,
        stack: DialogStack,
        text: str = "",
        locale: str | None = None,
    ) -> DialogContext:
        return dialogs.create_context(make_context(text, locale), stack)

    return _make
