"""Bridge layer: exposes SMS dispatch to a calling application.

``SMSModule`` wraps an ``SmsDispatcher`` behind the four named operations
a front-end invokes, converting every failure into a ``BridgeRejection``.
``create_module`` wires a module from runtime settings.
"""

from __future__ import annotations

from smsbridge.bridge.module import BridgeRejection, SMSModule
from smsbridge.config import BridgeSettings
from smsbridge.core.dispatcher import SmsDispatcher
from smsbridge.core.timer import Timer
from smsbridge.models.profiles import build_profiles
from smsbridge.platform import (
    PermissionProbe,
    SmsTransport,
    build_permission_probe,
    build_transport,
)


def create_module(
    settings: BridgeSettings | None = None,
    *,
    transport: SmsTransport | None = None,
    permission_probe: PermissionProbe | None = None,
    timer: Timer | None = None,
) -> SMSModule:
    """Build an ``SMSModule`` from *settings*, with optional overrides."""
    if settings is None:
        from smsbridge.config import settings as default_settings

        settings = default_settings

    if transport is None:
        if settings.transport == "termux":
            transport = build_transport("termux", command=settings.termux_command)
        else:
            transport = build_transport(settings.transport)
    if permission_probe is None:
        permission_probe = build_permission_probe(
            settings.transport,
            granted=settings.permission_granted,
            command=settings.termux_command,
        )

    profiles = build_profiles(settings)
    dispatcher = SmsDispatcher(
        transport,
        permission_probe,
        timer=timer,
        default_calling_code=settings.default_calling_code,
        default_profile=profiles["standard"],
    )
    return SMSModule(dispatcher, profiles)


__all__ = ["BridgeRejection", "SMSModule", "create_module"]
