"""Shared option handling for the send commands."""

from __future__ import annotations

import typer

from smsbridge.bridge import SMSModule, create_module
from smsbridge.config import settings
from smsbridge.core.timer import RecordingTimer
from smsbridge.platform import TRANSPORT_NAMES

VARIANTS = ("standard", "direct", "test")


def check_choice(value: str, choices: tuple[str, ...], option: str) -> str:
    if value not in choices:
        raise typer.BadParameter(
            f"{value!r} is not one of: {', '.join(choices)}", param_hint=option
        )
    return value


def build_module(transport: str | None, no_wait: bool) -> SMSModule:
    """Create a module for a CLI invocation from global settings."""
    name = check_choice(transport or settings.transport, TRANSPORT_NAMES, "--transport")
    overrides = settings.model_copy(update={"transport": name})
    return create_module(overrides, timer=RecordingTimer() if no_wait else None)
