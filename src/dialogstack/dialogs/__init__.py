"""Dialog stack engine."""

from dialogstack.dialogs.container import DialogContainer
from dialogstack.dialogs.dialog import Dialog
from dialogstack.dialogs.dialog_context import DialogContext
from dialogstack.dialogs.dialog_set import DialogSet
from dialogstack.dialogs.waterfall import WaterfallDialog, WaterfallStep

__all__ = [
    "Dialog",
    "DialogContainer",
    "DialogContext",
    "DialogSet",
    "WaterfallDialog",
    "WaterfallStep",
]
