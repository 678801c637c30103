"""Main CLI entry point for dialogstack"""

import asyncio
from pathlib import Path

import typer

from dialogstack.__version__ import __version__

app = typer.Typer(
    name="dialogstack",
    help="dialogstack - turn-based dialog stack runtime",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"dialogstack version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """dialogstack - turn-based dialog stack runtime"""
    pass


@app.command()
def chat(
    bot: str = typer.Option("profile", "--bot", "-b", help="Sample bot to run (age, profile)"),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Path to dialogstack.yaml or config directory"
    ),
    user_id: str | None = typer.Option(None, "--user", "-u", help="Conversation id"),
    locale: str | None = typer.Option(None, "--locale", "-l", help="Locale of the user"),
    verbose: bool = typer.Option(False, "--verbose", help="Verbose mode"),
) -> None:
    """Start interactive chat with a sample bot."""
    from dialogstack.cli.chat_runner import ChatConfig, run_chat_session
    from dialogstack.core.errors import ConfigError

    chat_config = ChatConfig(
        bot=bot,
        config_path=config,
        conversation_id=user_id,
        locale=locale,
        verbose=verbose,
    )

    try:
        asyncio.run(run_chat_session(chat_config))
    except KeyboardInterrupt:
        pass
    except ConfigError as e:
        typer.echo(f"Invalid configuration: {e}", err=True)
        raise typer.Exit(1)


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
