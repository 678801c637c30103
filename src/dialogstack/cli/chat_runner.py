"""Interactive chat runner for the dialogstack CLI."""

import uuid
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt

from dialogstack.config.loader import SettingsLoader
from dialogstack.config.models import DialogSettings
from dialogstack.core.constants import DialogTurnStatus
from dialogstack.core.errors import ConfigError
from dialogstack.core.message_sink import MessageSink, OutboundMessage
from dialogstack.observability.logging import setup_logging
from dialogstack.runtime.runner import DialogRunner
from dialogstack.samples.profile import SAMPLE_BOTS

EXIT_COMMANDS = ("exit", "quit")
CANCEL_COMMAND = "cancel"


class ConsoleMessageSink(MessageSink):
    """Sink that prints to rich console."""

    def __init__(self, console: Console):
        self.console = console

    async def send(self, message: OutboundMessage) -> None:
        self.console.print(f"[bold blue]Bot > [/]{message.text}\n")


@dataclass
class ChatConfig:
    """Configuration for chat runner."""

    bot: str = "profile"
    config_path: Path | None = None
    conversation_id: str | None = None
    locale: str | None = None
    verbose: bool = False


class ChatRunner:
    """Interactive chat session against one of the sample bots.

    Typing 'cancel' cancels the active dialogs; 'exit' or 'quit' ends the
    session.
    """

    def __init__(self, config: ChatConfig, console: Console | None = None):
        self.config = config
        self.console = console or Console()
        self.conversation_id = config.conversation_id or f"cli_{uuid.uuid4().hex[:6]}"
        self.runner: DialogRunner | None = None
        self.sink = ConsoleMessageSink(self.console)

    def setup(self) -> None:
        """Load settings and build the runner.

        Raises:
            ConfigError: If the settings file or the bot name is invalid.
        """
        settings = DialogSettings()
        if self.config.config_path is not None:
            settings = SettingsLoader.load(self.config.config_path)

        level = "DEBUG" if self.config.verbose else settings.logging.level
        setup_logging(level, settings.logging.file)

        factory = SAMPLE_BOTS.get(self.config.bot)
        if factory is None:
            raise ConfigError(
                f"Unknown bot '{self.config.bot}'", available=sorted(SAMPLE_BOTS)
            )
        self.runner = DialogRunner(factory(), "root", settings=settings)

    async def handle(self, text: str) -> DialogTurnStatus:
        """Process one line typed by the user."""
        if self.runner is None:
            raise RuntimeError("ChatRunner not set up. Call setup() first.")
        if text.strip().lower() == CANCEL_COMMAND:
            turn = await self.runner.cancel(self.conversation_id, self.sink)
        else:
            turn = await self.runner.process_message(
                text, self.sink, self.conversation_id, locale=self.config.locale
            )
        if turn.status is DialogTurnStatus.COMPLETE:
            self.console.print(f"[dim]Dialog completed with result: {turn.result}[/]")
        elif turn.status is DialogTurnStatus.CANCELLED:
            self.console.print("[dim]Dialogs cancelled[/]")
        return turn.status

    async def run(self) -> None:
        """Read user input until an exit command."""
        self.setup()
        self.console.print(
            f"[bold]dialogstack[/] sample '{self.config.bot}' "
            f"(conversation {self.conversation_id}). Type 'exit' to quit.\n"
        )
        while True:
            text = Prompt.ask("[bold green]You[/]", console=self.console)
            if text.strip().lower() in EXIT_COMMANDS:
                break
            await self.handle(text)


async def run_chat_session(config: ChatConfig) -> None:
    """Run an interactive session with the given configuration."""
    await ChatRunner(config).run()
