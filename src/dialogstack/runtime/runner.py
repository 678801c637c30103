"""Turn processing entry point for hosts."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from dialogstack.config.models import DialogSettings
from dialogstack.core.constants import DialogTurnStatus
from dialogstack.core.errors import DialogNotFoundError
from dialogstack.core.message_sink import MessageSink
from dialogstack.core.turn_context import Activity, TurnContext
from dialogstack.core.types import DialogTurnResult
from dialogstack.dialogs.dialog_context import DialogContext
from dialogstack.dialogs.dialog_set import DialogSet
from dialogstack.observability.logging import ContextLogger
from dialogstack.runtime.store import StackStore, create_stack_store

logger = ContextLogger(__name__)


class DialogRunner:
    """Runs one turn per inbound message for any number of conversations.

    Each turn loads the conversation's stack, continues the active dialog and,
    when nothing is running, begins the root dialog. The stack is saved only
    after the turn settles; if the turn raises (for example because the sink
    failed to deliver a message) nothing is saved and the error propagates.

    Turns of the same conversation are serialized; different conversations
    run independently.

    Usage:
        runner = DialogRunner(dialogs, "root")
        sink = BufferedMessageSink()
        await runner.process_message("hi", sink, conversation_id="user1")
    """

    def __init__(
        self,
        dialogs: DialogSet,
        root_dialog_id: str,
        store: StackStore | None = None,
        settings: DialogSettings | None = None,
    ) -> None:
        if root_dialog_id not in dialogs:
            raise DialogNotFoundError(
                f"Root dialog '{root_dialog_id}' not found", dialog_id=root_dialog_id
            )
        self.dialogs = dialogs
        self.root_dialog_id = root_dialog_id
        self.settings = settings or DialogSettings()
        self.store = store or create_stack_store(
            self.settings.persistence.backend,
            namespace=self.settings.persistence.namespace,
        )
        # Locks exist only while a turn of that conversation is running or queued
        self._locks: dict[str, asyncio.Lock] = {}
        self._lock_users: dict[str, int] = {}

    async def process_message(
        self,
        text: str,
        sink: MessageSink,
        conversation_id: str = "default",
        locale: str | None = None,
        options: Any = None,
    ) -> DialogTurnResult:
        """Process one user message and return the turn outcome.

        Args:
            text: Raw user text.
            sink: Where outbound messages are delivered.
            conversation_id: Identity the stack is stored under.
            locale: Locale reported by the channel, if any.
            options: Options passed to the root dialog when it is begun.
        """
        activity = Activity(text=text, locale=locale, conversation_id=conversation_id)
        log = logger.for_conversation(conversation_id)

        async with self._serialized(conversation_id):
            dc = await self._load_context(activity, sink)
            turn = await dc.continue_dialog()
            if turn.status is DialogTurnStatus.EMPTY:
                log.debug(
                    f"No active dialog, beginning '{self.root_dialog_id}'",
                    extra={"dialog_id": self.root_dialog_id},
                )
                turn = await dc.begin_dialog(self.root_dialog_id, options)

            await self.store.save(conversation_id, dc.stack)
            active = dc.active_dialog
            log.info(
                f"Turn finished with status {turn.status.value}",
                extra={"dialog_id": active["id"] if active else None, "depth": dc.depth},
            )
            return turn

    async def cancel(self, conversation_id: str, sink: MessageSink) -> DialogTurnResult:
        """Cancel every active dialog of a conversation."""
        activity = Activity(conversation_id=conversation_id)
        async with self._serialized(conversation_id):
            dc = await self._load_context(activity, sink)
            turn = await dc.cancel_all_dialogs()
            await self.store.save(conversation_id, dc.stack)
            logger.for_conversation(conversation_id).info("Conversation cancelled")
            return turn

    async def reset(self, conversation_id: str) -> None:
        """Drop the stored stack without running cancel hooks."""
        async with self._serialized(conversation_id):
            await self.store.delete(conversation_id)

    async def _load_context(self, activity: Activity, sink: MessageSink) -> DialogContext:
        stack = await self.store.load(activity.conversation_id)
        context = TurnContext(activity, sink, default_locale=self.settings.default_locale)
        return self.dialogs.create_context(context, stack)

    @asynccontextmanager
    async def _serialized(self, conversation_id: str) -> AsyncIterator[None]:
        lock = self._locks.get(conversation_id)
        if lock is None:
            lock = self._locks[conversation_id] = asyncio.Lock()
        self._lock_users[conversation_id] = self._lock_users.get(conversation_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[conversation_id] -= 1
            if not self._lock_users[conversation_id]:
                del self._lock_users[conversation_id]
                del self._locks[conversation_id]
