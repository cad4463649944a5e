"""``smsbridge send``: send one SMS through the configured transport.

The ``--variant`` option selects the send operation: ``standard`` retries,
``direct`` and ``test`` make a single attempt with shorter settle waits.
"""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel

from smsbridge.bridge import BridgeRejection
from smsbridge.cli.commands._common import VARIANTS, build_module, check_choice

console = Console()


def send_cmd(
    phone: str = typer.Argument(..., help="Recipient phone number."),
    message: str = typer.Argument(..., help="Message text."),
    variant: str = typer.Option(
        "standard",
        "--variant",
        "-v",
        help="Send operation: standard, direct or test.",
    ),
    transport: str = typer.Option(
        None,
        "--transport",
        "-t",
        help="Transport backend: console, memory or termux.",
    ),
    no_wait: bool = typer.Option(
        False,
        "--no-wait",
        help="Skip backoff and settle waits.",
    ),
) -> None:
    """Send a single SMS and report the outcome."""
    variant = check_choice(variant, VARIANTS, "--variant")
    module = build_module(transport, no_wait)
    operation = {
        "standard": module.send_sms,
        "direct": module.send_sms_direct,
        "test": module.test_sms,
    }[variant]

    try:
        result = asyncio.run(operation(phone, message))
    except BridgeRejection as rejection:
        console.print(
            Panel(
                f"[bold]{rejection.code}[/bold]\n{rejection.message}",
                title="[bold red]SMS rejected[/bold red]",
                border_style="red",
            )
        )
        raise typer.Exit(code=1)

    console.print(
        Panel(
            f"{result['message']}\nPhone: [cyan]{result['phone']}[/cyan]",
            title=f"[bold green]SMS sent ({variant})[/bold green]",
            border_style="green",
        )
    )
