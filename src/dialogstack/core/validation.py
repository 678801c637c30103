"""Prompt validation system.

Validators receive the turn context and the recognized value. They return the
accepted value, or None to reject it. Validators can be sync or async and may
send their own rejection message through the turn context.

Usage:
    from dialogstack.core.validation import register_validator

    def validate_positive(context, value):
        return value if value > 0 else None

    register_validator("positive", validate_positive)

    dialogs.add("amount", NumberPrompt(validator="positive"))
"""

import inspect
import logging
import math
from collections.abc import Awaitable, Callable
from typing import Any

from dialogstack.core.errors import ValidationError
from dialogstack.core.turn_context import TurnContext

logger = logging.getLogger(__name__)

ValidatorFn = Callable[[TurnContext, Any], Any | Awaitable[Any]]

# Global registry of named validators
_validators: dict[str, ValidatorFn] = {}


def register_validator(name: str, fn: ValidatorFn) -> None:
    """Register a validator function.

    Args:
        name: Unique validator name
        fn: Function returning the accepted value or None
    """
    if name in _validators:
        logger.warning(
            f"Validator '{name}' already registered, overwriting",
            extra={"validator_name": name},
        )
    _validators[name] = fn


def get_validator(name: str) -> ValidatorFn | None:
    """Get a validator by name."""
    return _validators.get(name)


def resolve_validator(validator: ValidatorFn | str | None) -> ValidatorFn | None:
    """Turn a validator name into its function.

    Raises:
        ValidationError: If a name is given that was never registered.
    """
    if validator is None or callable(validator):
        return validator
    fn = _validators.get(validator)
    if fn is None:
        raise ValidationError(
            f"Validator '{validator}' not registered",
            available=sorted(_validators),
        )
    return fn


async def run_validator(fn: ValidatorFn, context: TurnContext, value: Any) -> Any:
    """Call a validator and await it if it is async."""
    result = fn(context, value)
    if inspect.isawaitable(result):
        return await result
    return result


def clear_validators() -> None:
    """Clear all validators (for testing)."""
    _validators.clear()


def in_range(
    minimum: float,
    maximum: float,
    *,
    message: str | None = None,
    integer: bool = False,
) -> ValidatorFn:
    """Build a validator accepting numbers within [minimum, maximum].

    When message is given it is sent on rejection, which replaces the
    prompt's retry text for that attempt.
    """

    async def _validate(context: TurnContext, value: Any) -> Any:
        if (
            isinstance(value, (int, float))
            and not isinstance(value, bool)
            and (isinstance(value, int) or math.isfinite(value))
        ):
            if integer and value != int(value):
                value = None
            elif minimum <= value <= maximum:
                return int(value) if integer else value
        if message:
            await context.send(message)
        return None

    return _validate


# Built-in validators
def _validate_not_empty(context: TurnContext, value: Any) -> Any:
    """Accept any value that is not blank."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _validate_positive(context: TurnContext, value: Any) -> Any:
    """Accept numeric values greater than zero."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value if value > 0 else None
    try:
        return value if float(value) > 0 else None
    except (ValueError, TypeError, OverflowError):
        return None


def _validate_email(context: TurnContext, value: Any) -> Any:
    """Basic email validation."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    return value if "@" in value and "." in value else None


register_validator("not_empty", _validate_not_empty)
register_validator("positive", _validate_positive)
register_validator("email", _validate_email)
