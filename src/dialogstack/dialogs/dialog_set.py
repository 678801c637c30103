"""Registry of dialogs addressable by id."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from dialogstack.core.errors import DuplicateDialogError
from dialogstack.core.turn_context import TurnContext
from dialogstack.core.types import DialogStack
from dialogstack.dialogs.dialog import Dialog
from dialogstack.dialogs.waterfall import WaterfallDialog, WaterfallStep

if TYPE_CHECKING:
    from dialogstack.dialogs.dialog_context import DialogContext

logger = logging.getLogger(__name__)


class DialogSet:
    """Maps dialog ids to Dialog instances.

    Registration happens at setup time. A sequence of callables is wrapped
    into a WaterfallDialog.

    Usage:
        dialogs = DialogSet()
        dialogs.add("name", TextPrompt())
        dialogs.add("greet", [ask_name, say_hello])
    """

    def __init__(self) -> None:
        self._dialogs: dict[str, Dialog] = {}

    def add(self, dialog_id: str, dialog: Dialog | Sequence[WaterfallStep]) -> Dialog:
        """Register a dialog under a unique id.

        Raises:
            DuplicateDialogError: If the id is already registered.
        """
        if dialog_id in self._dialogs:
            raise DuplicateDialogError(
                f"Dialog '{dialog_id}' is already registered", dialog_id=dialog_id
            )
        if not isinstance(dialog, Dialog):
            dialog = WaterfallDialog(dialog)
        self._dialogs[dialog_id] = dialog
        logger.debug(f"Registered dialog '{dialog_id}'", extra={"dialog_id": dialog_id})
        return dialog

    def find(self, dialog_id: str) -> Dialog | None:
        """Get a dialog by id."""
        return self._dialogs.get(dialog_id)

    def ids(self) -> list[str]:
        """List registered dialog ids."""
        return list(self._dialogs)

    def create_context(self, context: TurnContext, stack: DialogStack) -> "DialogContext":
        """Bind a stack loaded for this turn to the registry."""
        from dialogstack.dialogs.dialog_context import DialogContext

        return DialogContext(self, context, stack)

    def __contains__(self, dialog_id: object) -> bool:
        return dialog_id in self._dialogs

    def __len__(self) -> int:
        return len(self._dialogs)
