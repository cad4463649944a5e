"""``smsbridge check-permission``: report the host SMS permission."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console

from smsbridge.bridge import BridgeRejection
from smsbridge.cli.commands._common import build_module

console = Console()


def check_permission_cmd(
    transport: str = typer.Option(
        None,
        "--transport",
        "-t",
        help="Transport backend: console, memory or termux.",
    ),
) -> None:
    """Report whether the selected transport may send SMS."""
    module = build_module(transport, no_wait=True)
    try:
        result = asyncio.run(module.check_sms_permission())
    except BridgeRejection as rejection:
        console.print(f"[red]{rejection.code}[/red] {rejection.message}")
        raise typer.Exit(code=1)

    if result["hasPermission"]:
        console.print("[green]SMS permission granted.[/green]")
    else:
        console.print(
            "[yellow]SMS permission not granted.[/yellow] "
            "Grant SMS permission in app settings."
        )
