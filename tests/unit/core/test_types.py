"""Unit tests for core types."""

import pytest
from pydantic import ValidationError as PydanticValidationError

from dialogstack.core.constants import DialogTurnStatus
from dialogstack.core.types import DialogState, DialogTurnResult, PromptOptions


class TestPromptOptions:
    def test_coerce_string_sets_prompt(self):
        assert PromptOptions.coerce("Age?") == PromptOptions(prompt="Age?")

    def test_coerce_none_gives_empty_options(self):
        assert PromptOptions.coerce(None) == PromptOptions()

    def test_coerce_dict_validates(self):
        options = PromptOptions.coerce({"prompt": "Age?", "retry_prompt": "Again"})

        assert options.retry_prompt == "Again"

    def test_coerce_returns_same_instance(self):
        options = PromptOptions(prompt="x")

        assert PromptOptions.coerce(options) is options

    def test_options_are_immutable(self):
        options = PromptOptions(prompt="x")

        with pytest.raises(PydanticValidationError):
            options.prompt = "y"


class TestDialogTurnResult:
    def test_status_helpers(self):
        assert DialogTurnResult(DialogTurnStatus.WAITING).is_waiting
        assert DialogTurnResult(DialogTurnStatus.COMPLETE, 1).is_complete
        assert not DialogTurnResult(DialogTurnStatus.EMPTY).is_complete

    def test_status_values_are_strings(self):
        assert DialogTurnStatus.CANCELLED.value == "cancelled"


class TestDialogState:
    def test_writes_go_to_the_frame(self):
        # Arrange
        instance = {"id": "a", "state": {}}
        state = DialogState(instance)

        # Act
        state["name"] = "Ada"
        state.setdefault("tries", 0)

        # Assert
        assert instance["state"] == {"name": "Ada", "tries": 0}
        assert len(state) == 2
        assert set(state) == {"name", "tries"}

    def test_delete_removes_key(self):
        instance = {"id": "a", "state": {"k": 1}}
        state = DialogState(instance)

        del state["k"]

        assert instance["state"] == {}
