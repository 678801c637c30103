"""Custom exception hierarchy for dialogstack.

All errors inherit from DialogError so hosts can catch them in one place.
Keyword arguments passed to an error are kept as context and rendered in the
message.
"""

from typing import Any


class DialogError(Exception):
    """Base exception for all dialogstack errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class ConfigError(DialogError):
    """Raised when configuration is invalid."""


class DuplicateDialogError(ConfigError):
    """Raised when a dialog id is registered twice."""


class DialogNotFoundError(ConfigError):
    """Raised when a dialog id is not registered.

    Seeing this for an id that is already on the stack means the persisted
    stack and the registry disagree.
    """


class DialogStackError(DialogError):
    """Raised when stack operations fail."""


class PromptError(DialogError):
    """Raised when a prompt is started with unusable options."""


class PersistenceError(DialogError):
    """Raised when the stack cannot be loaded or saved."""


class ValidationError(DialogError):
    """Raised when a validator cannot be resolved or run."""
