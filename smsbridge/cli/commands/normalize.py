"""``smsbridge normalize``: show the dialable form of a phone number."""

from __future__ import annotations

import typer
from rich.console import Console

from smsbridge.config import settings
from smsbridge.core.normalizer import is_valid_phone_number, normalize_address

console = Console()


def normalize_cmd(
    phone: str = typer.Argument(..., help="Phone number to normalize."),
    calling_code: str = typer.Option(
        None,
        "--calling-code",
        "-c",
        help="Default calling code (overrides SMSBRIDGE_DEFAULT_CALLING_CODE).",
    ),
) -> None:
    """Print the normalized address for PHONE."""
    code = calling_code or settings.default_calling_code
    console.print(normalize_address(phone, code))
    if not is_valid_phone_number(phone):
        console.print("[yellow]Warning:[/yellow] expected 10 to 15 digits.")
