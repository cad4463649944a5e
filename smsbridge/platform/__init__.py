"""Host capability protocols and backend factories.

The Dispatcher depends on two host-supplied capabilities:

1. ``SmsTransport``: hands a message to the OS messaging stack.
2. ``PermissionProbe``: reports whether sending is currently allowed.

Backends are selected by name:

- ``"memory"``: in-process recorder, scriptable failures (tests).
- ``"console"``: logs the message instead of sending it (dry run).
- ``"termux"``: Android via the Termux:API ``termux-sms-send`` command.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SmsTransport(Protocol):
    """Protocol for the host messaging capability.

    ``send_text`` returns ``None`` when the host accepted the message and
    raises on any failure.  It may be called concurrently by simultaneous
    dispatches.
    """

    def send_text(self, address: str, body: str) -> None:
        ...


@runtime_checkable
class PermissionProbe(Protocol):
    """Protocol for the host permission query."""

    def has_send_permission(self) -> bool:
        ...


TRANSPORT_NAMES = ("console", "memory", "termux")


def build_transport(name: str, **kwargs: object) -> SmsTransport:
    """Return the transport backend registered under *name*.

    Raises
    ------
    ValueError
        If *name* is not a known backend.
    """
    if name == "memory":
        from smsbridge.platform.memory import InMemoryTransport

        return InMemoryTransport(**kwargs)  # type: ignore[arg-type]
    if name == "console":
        from smsbridge.platform.console import ConsoleTransport

        return ConsoleTransport()
    if name == "termux":
        from smsbridge.platform.termux import TermuxTransport

        return TermuxTransport(**kwargs)  # type: ignore[arg-type]
    raise ValueError(
        f"Unknown transport {name!r}. Expected one of: {', '.join(TRANSPORT_NAMES)}"
    )


def build_permission_probe(
    name: str, *, granted: bool = True, command: str = "termux-sms-send"
) -> PermissionProbe:
    """Return the permission probe that pairs with transport *name*."""
    if name in ("memory", "console"):
        from smsbridge.platform.memory import StaticPermissionProbe

        return StaticPermissionProbe(granted)
    if name == "termux":
        from smsbridge.platform.termux import TermuxPermissionProbe

        return TermuxPermissionProbe(command=command)
    raise ValueError(
        f"Unknown transport {name!r}. Expected one of: {', '.join(TRANSPORT_NAMES)}"
    )


__all__ = [
    "SmsTransport",
    "PermissionProbe",
    "TRANSPORT_NAMES",
    "build_transport",
    "build_permission_probe",
]
