"""Main Typer application: imports and registers all CLI commands.

Entry point: ``smsbridge`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer
from rich.logging import RichHandler

from smsbridge.cli.commands._common import check_choice
from smsbridge.cli.commands.batch import send_batch_cmd
from smsbridge.cli.commands.normalize import normalize_cmd
from smsbridge.cli.commands.permission import check_permission_cmd
from smsbridge.cli.commands.send import send_cmd
from smsbridge.config import settings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

app = typer.Typer(
    name="smsbridge",
    help="smsbridge: permission-gated SMS dispatch with bounded retries.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        None, "--log-level", help="Logging level (overrides SMSBRIDGE_LOG_LEVEL)."
    ),
) -> None:
    """Configure logging before any command runs."""
    level = (log_level or settings.log_level).upper()
    check_choice(level, LOG_LEVELS, "--log-level")
    configure_logging(level)


def configure_logging(level: str) -> None:
    """Route ``smsbridge`` loggers through a Rich handler at *level*."""
    root = logging.getLogger("smsbridge")
    root.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(RichHandler(show_path=False, rich_tracebacks=True))


# Register subcommands
app.command(name="send", help="Send one SMS.")(send_cmd)
app.command(name="send-batch", help="Send one message to several recipients.")(
    send_batch_cmd
)
app.command(name="check-permission", help="Report SMS send permission.")(
    check_permission_cmd
)
app.command(name="normalize", help="Show the normalized form of a phone number.")(
    normalize_cmd
)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
