"""Shared test fixtures for smsbridge."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from smsbridge.bridge import SMSModule
from smsbridge.core.dispatcher import SmsDispatcher
from smsbridge.core.timer import RecordingTimer
from smsbridge.models.requests import SendRequest
from smsbridge.platform.memory import InMemoryTransport, StaticPermissionProbe


@pytest.fixture
def transport() -> InMemoryTransport:
    """Provide an in-memory transport that always accepts."""
    return InMemoryTransport()


@pytest.fixture
def permission() -> StaticPermissionProbe:
    """Provide a permission probe that reports granted."""
    return StaticPermissionProbe(granted=True)


@pytest.fixture
def timer() -> RecordingTimer:
    """Provide a timer that records delays without waiting."""
    return RecordingTimer()


@pytest.fixture
def dispatcher(
    transport: InMemoryTransport,
    permission: StaticPermissionProbe,
    timer: RecordingTimer,
) -> SmsDispatcher:
    """Provide a dispatcher wired to the in-memory test doubles."""
    return SmsDispatcher(transport, permission, timer=timer)


@pytest.fixture
def sms_module(dispatcher: SmsDispatcher) -> SMSModule:
    """Provide an SMSModule over the test dispatcher."""
    return SMSModule(dispatcher)


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_dispatcher(
    permission: StaticPermissionProbe, timer: RecordingTimer
) -> Callable[..., tuple[SmsDispatcher, InMemoryTransport]]:
    """Factory fixture: build a dispatcher over a scripted transport."""

    def _factory(**transport_kwargs: Any) -> tuple[SmsDispatcher, InMemoryTransport]:
        scripted = InMemoryTransport(**transport_kwargs)
        return SmsDispatcher(scripted, permission, timer=timer), scripted

    return _factory


@pytest.fixture
def make_request() -> Callable[..., SendRequest]:
    """Factory fixture: build a SendRequest with sensible defaults."""

    def _factory(destination: str = "9876543210", body: str = "hello") -> SendRequest:
        return SendRequest(destination=destination, body=body)

    return _factory
