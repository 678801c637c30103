"""Runtime: turn processing and stack persistence."""

from dialogstack.runtime.runner import DialogRunner
from dialogstack.runtime.store import (
    LangGraphStackStore,
    MemoryStackStore,
    StackStore,
    create_stack_store,
)

__all__ = [
    "DialogRunner",
    "LangGraphStackStore",
    "MemoryStackStore",
    "StackStore",
    "create_stack_store",
]
