"""Core type definitions for the dialog stack."""

from collections.abc import Iterator, MutableMapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing_extensions import TypedDict

from dialogstack.core.constants import DialogTurnStatus


class DialogInstance(TypedDict):
    """One activation of a registered dialog on the stack."""

    id: str
    state: dict[str, Any]


# Top of stack is the last element
DialogStack = list[DialogInstance]

STACK_ADAPTER: TypeAdapter[list[DialogInstance]] = TypeAdapter(list[DialogInstance])


@dataclass(frozen=True)
class DialogTurnResult:
    """Result of a lifecycle hook or of driving the stack for a turn."""

    status: DialogTurnStatus
    result: Any = None

    @property
    def is_waiting(self) -> bool:
        return self.status is DialogTurnStatus.WAITING

    @property
    def is_complete(self) -> bool:
        return self.status is DialogTurnStatus.COMPLETE


class PromptOptions(BaseModel):
    """Output variants for the first attempt and for retries of a prompt."""

    model_config = ConfigDict(frozen=True)

    prompt: str | None = Field(default=None, description="Initial prompt text")
    retry_prompt: str | None = Field(default=None, description="Text sent after a rejection")
    speak: str | None = Field(default=None, description="Speech for the initial prompt")
    retry_speak: str | None = Field(default=None, description="Speech for the retry prompt")

    @classmethod
    def coerce(cls, options: "PromptOptions | str | dict[str, Any] | None") -> "PromptOptions":
        """Build options from the loose forms accepted by begin_dialog."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, str):
            return cls(prompt=options)
        return cls.model_validate(options)


class DialogState(MutableMapping[str, Any]):
    """Handle to the private state of a single stack frame.

    Dialogs reach their state only through this handle, which is bound to the
    frame that is active while the hook runs.
    """

    __slots__ = ("_data",)

    def __init__(self, instance: DialogInstance) -> None:
        self._data = instance["state"]

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"DialogState({self._data!r})"
