"""Sample bots built from the stack primitives.

``build_age_bot`` asks for an age between 1 and 110 and echoes it.
``build_profile_bot`` runs the reusable ProfileDialog component and thanks
the user with the collected profile.
"""

from typing import Any

from dialogstack.core.types import DialogTurnResult
from dialogstack.core.validation import in_range
from dialogstack.dialogs.container import DialogContainer
from dialogstack.dialogs.dialog_context import DialogContext
from dialogstack.dialogs.dialog_set import DialogSet
from dialogstack.prompts.number import NumberPrompt
from dialogstack.prompts.text import TextPrompt

AGE_PROMPT = "How old are you?"
AGE_RETRY_PROMPT = "Please enter an age between 1 and 110."


async def _ask_age(dc: DialogContext, options: Any) -> DialogTurnResult:
    return await dc.prompt("age", AGE_PROMPT, retry_prompt=AGE_RETRY_PROMPT)


async def _show_age(dc: DialogContext, age: int) -> DialogTurnResult:
    await dc.context.send(f"age={age}")
    return await dc.end_dialog(age)


def build_age_bot() -> DialogSet:
    """Registry with an integer age prompt (1-110) under a 'root' waterfall."""
    dialogs = DialogSet()
    dialogs.add("age", NumberPrompt(in_range(1, 110, integer=True)))
    dialogs.add("root", [_ask_age, _show_age])
    return dialogs


class ProfileDialog(DialogContainer):
    """Collects a name and a phone number and returns them as one dict."""

    def __init__(self) -> None:
        super().__init__("fill_profile")
        self.add("fill_profile", [self.ask_name, self.ask_phone, self.finish])
        self.add("name", TextPrompt())
        self.add("phone", TextPrompt())

    @staticmethod
    async def ask_name(dc: DialogContext, options: Any) -> DialogTurnResult:
        return await dc.prompt("name", "What's your name?")

    @staticmethod
    async def ask_phone(dc: DialogContext, name: str) -> DialogTurnResult:
        dc.state["name"] = name
        return await dc.prompt("phone", "What's your phone number?")

    @staticmethod
    async def finish(dc: DialogContext, phone: str) -> DialogTurnResult:
        profile = {"name": dc.state["name"], "phone": phone}
        return await dc.end_dialog(profile)


async def _welcome(dc: DialogContext, options: Any) -> DialogTurnResult:
    await dc.context.send("Welcome! We need to ask a few questions to get started.")
    return await dc.begin_dialog("profile")


async def _thank(dc: DialogContext, profile: dict[str, str]) -> DialogTurnResult:
    await dc.context.send(f"Thanks {profile['name']}! We'll call you at {profile['phone']}.")
    return await dc.end_dialog(profile)


def build_profile_bot() -> DialogSet:
    """Registry with ProfileDialog nested under a 'root' waterfall."""
    dialogs = DialogSet()
    dialogs.add("profile", ProfileDialog())
    dialogs.add("root", [_welcome, _thank])
    return dialogs


SAMPLE_BOTS = {
    "age": build_age_bot,
    "profile": build_profile_bot,
}
