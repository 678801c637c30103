"""Stack persistence.

Stores keep one serialized stack per conversation id. Supported backends:
- memory: JSON in a dict (development/testing)
- langgraph: any langgraph BaseStore (InMemoryStore by default; Postgres or
  SQLite stores can be passed in)
"""

import copy
import logging
from abc import ABC, abstractmethod
from typing import Any

from langgraph.store.base import BaseStore
from langgraph.store.memory import InMemoryStore

from dialogstack.core.errors import ConfigError, PersistenceError
from dialogstack.core.types import STACK_ADAPTER, DialogStack

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = ("dialogstack", "stacks")


class StackStore(ABC):
    """Load/save contract for per-conversation stacks.

    Loading always returns a fresh copy; nothing is shared between turns.
    """

    @abstractmethod
    async def load(self, conversation_id: str) -> DialogStack:
        """Return the persisted stack, or an empty one."""
        ...

    @abstractmethod
    async def save(self, conversation_id: str, stack: DialogStack) -> None:
        """Persist the stack for the conversation."""
        ...

    @abstractmethod
    async def delete(self, conversation_id: str) -> None:
        """Forget the conversation's stack."""
        ...


class MemoryStackStore(StackStore):
    """Keeps stacks as JSON documents in a dict."""

    def __init__(self) -> None:
        self._documents: dict[str, bytes] = {}

    async def load(self, conversation_id: str) -> DialogStack:
        document = self._documents.get(conversation_id)
        if document is None:
            return []
        try:
            return STACK_ADAPTER.validate_json(document)
        except ValueError as e:
            raise PersistenceError(
                "Stored stack is corrupt", conversation_id=conversation_id
            ) from e

    async def save(self, conversation_id: str, stack: DialogStack) -> None:
        try:
            self._documents[conversation_id] = STACK_ADAPTER.dump_json(stack)
        except ValueError as e:
            raise PersistenceError(
                "Stack is not serializable", conversation_id=conversation_id
            ) from e

    async def delete(self, conversation_id: str) -> None:
        self._documents.pop(conversation_id, None)

    def __contains__(self, conversation_id: object) -> bool:
        return conversation_id in self._documents


class LangGraphStackStore(StackStore):
    """Keeps stacks in a langgraph BaseStore under a namespace."""

    def __init__(
        self,
        store: BaseStore | None = None,
        namespace: tuple[str, ...] = DEFAULT_NAMESPACE,
    ) -> None:
        self.store = store or InMemoryStore()
        self.namespace = namespace

    async def load(self, conversation_id: str) -> DialogStack:
        item = await self.store.aget(self.namespace, conversation_id)
        if item is None:
            return []
        try:
            return STACK_ADAPTER.validate_python(copy.deepcopy(item.value["stack"]))
        except (KeyError, ValueError) as e:
            raise PersistenceError(
                "Stored stack is corrupt", conversation_id=conversation_id
            ) from e

    async def save(self, conversation_id: str, stack: DialogStack) -> None:
        try:
            value: dict[str, Any] = {"stack": STACK_ADAPTER.dump_python(stack, mode="json")}
        except ValueError as e:
            raise PersistenceError(
                "Stack is not serializable", conversation_id=conversation_id
            ) from e
        await self.store.aput(self.namespace, conversation_id, value)

    async def delete(self, conversation_id: str) -> None:
        await self.store.adelete(self.namespace, conversation_id)


def create_stack_store(
    backend: str = "memory",
    **kwargs: Any,
) -> StackStore:
    """Create a stack store.

    Args:
        backend: "memory" or "langgraph".
        kwargs: Backend-specific arguments:
            - langgraph: store (BaseStore), namespace (str or tuple of str)

    Raises:
        ConfigError: If the backend is unknown.
    """
    if backend == "memory":
        logger.debug("Creating in-memory stack store")
        return MemoryStackStore()

    if backend == "langgraph":
        namespace = kwargs.get("namespace") or DEFAULT_NAMESPACE
        if isinstance(namespace, str):
            namespace = tuple(namespace.split("."))
        logger.info(f"Creating langgraph stack store under namespace {namespace}")
        return LangGraphStackStore(store=kwargs.get("store"), namespace=namespace)

    raise ConfigError(f"Unknown stack store backend: {backend}", backend=backend)
