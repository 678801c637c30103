"""dialogstack - turn-based dialog stack runtime.

Dialogs are pushed on a per-conversation stack, pause after sending output
and resume on the next user message exactly where they left off.

Quick start:
    from dialogstack import BufferedMessageSink, DialogRunner, DialogSet, NumberPrompt

    dialogs = DialogSet()
    dialogs.add("age", NumberPrompt())
    dialogs.add("root", [ask_age, show_age])

    runner = DialogRunner(dialogs, "root")
    await runner.process_message("hi", BufferedMessageSink())
"""

from dialogstack.__version__ import __version__
from dialogstack.core import (
    Activity,
    BufferedMessageSink,
    DialogInstance,
    DialogTurnResult,
    DialogTurnStatus,
    MessageSink,
    OutboundMessage,
    PromptOptions,
    TurnContext,
)
from dialogstack.core.errors import (
    ConfigError,
    DialogError,
    DialogNotFoundError,
    DialogStackError,
    DuplicateDialogError,
    PersistenceError,
    PromptError,
    ValidationError,
)
from dialogstack.dialogs import (
    Dialog,
    DialogContainer,
    DialogContext,
    DialogSet,
    WaterfallDialog,
)
from dialogstack.prompts import (
    ConfirmPrompt,
    DatetimePrompt,
    NumberPrompt,
    Prompt,
    TextPrompt,
)
from dialogstack.runtime import DialogRunner, MemoryStackStore, StackStore

__all__ = [
    "__version__",
    # Core types
    "Activity",
    "BufferedMessageSink",
    "DialogInstance",
    "DialogTurnResult",
    "DialogTurnStatus",
    "MessageSink",
    "OutboundMessage",
    "PromptOptions",
    "TurnContext",
    # Engine
    "Dialog",
    "DialogContainer",
    "DialogContext",
    "DialogSet",
    "WaterfallDialog",
    # Prompts
    "ConfirmPrompt",
    "DatetimePrompt",
    "NumberPrompt",
    "Prompt",
    "TextPrompt",
    # Runtime
    "DialogRunner",
    "MemoryStackStore",
    "StackStore",
    # Errors
    "ConfigError",
    "DialogError",
    "DialogNotFoundError",
    "DialogStackError",
    "DuplicateDialogError",
    "PersistenceError",
    "PromptError",
    "ValidationError",
]
