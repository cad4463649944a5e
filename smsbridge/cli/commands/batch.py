"""``smsbridge send-batch``: send the same message to several recipients."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from smsbridge.cli.commands._common import VARIANTS, build_module, check_choice
from smsbridge.models.requests import SendRequest

console = Console()


def send_batch_cmd(
    message: str = typer.Argument(..., help="Message text."),
    phones: list[str] = typer.Argument(..., help="Recipient phone numbers."),
    variant: str = typer.Option("standard", "--variant", "-v"),
    transport: str = typer.Option(None, "--transport", "-t"),
    no_wait: bool = typer.Option(False, "--no-wait"),
) -> None:
    """Send *message* to every phone number and summarize the results."""
    variant = check_choice(variant, VARIANTS, "--variant")
    module = build_module(transport, no_wait)
    requests = [SendRequest(destination=phone, body=message) for phone in phones]
    report = asyncio.run(
        module.dispatcher.dispatch_many(requests, module.profile(variant))
    )

    table = Table(title="Batch results", header_style="bold cyan")
    table.add_column("Recipient")
    table.add_column("Status", justify="center")
    table.add_column("Attempts", justify="right")
    table.add_column("Details")

    for entry in report.results:
        if entry.outcome is None:
            table.add_row(entry.destination, "[red]REJECTED[/red]", "-", entry.error_message)
        elif entry.outcome.succeeded:
            table.add_row(
                entry.destination,
                "[green]SENT[/green]",
                str(entry.outcome.attempts),
                entry.outcome.normalized_address,
            )
        else:
            table.add_row(
                entry.destination,
                "[red]FAILED[/red]",
                str(entry.outcome.attempts),
                entry.outcome.reason,
            )

    console.print(table)
    console.print(
        f"[bold]{report.successful}/{report.total}[/bold] sent, "
        f"[bold]{report.failed}[/bold] failed"
    )
    if report.failed:
        raise typer.Exit(code=1)
