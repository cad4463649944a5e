"""Adversarial tests: dispatch resilience under hostile input and transports.

These tests verify that:
1. Odd address shapes never gain an unexpected prefix
2. Transports raising arbitrary exception types are retried, never leaked
3. A transport that fails then recovers is never over-called
4. Bridge operations never raise anything but BridgeRejection
"""

from __future__ import annotations

import asyncio

import pytest

from smsbridge.bridge import BridgeRejection, SMSModule
from smsbridge.core.dispatcher import SmsDispatcher
from smsbridge.core.normalizer import normalize_address
from smsbridge.core.timer import RecordingTimer
from smsbridge.models.outcomes import SendFailure
from smsbridge.models.requests import SendRequest
from smsbridge.platform.memory import StaticPermissionProbe

# ---------------------------------------------------------------------------
# Test transports
# ---------------------------------------------------------------------------


class RaisingTransport:
    """A transport that always raises the given exception type."""

    def __init__(self, exc_type: type[BaseException] = RuntimeError) -> None:
        self.exc_type = exc_type
        self.calls = 0

    def send_text(self, address: str, body: str) -> None:
        self.calls += 1
        raise self.exc_type("boom")


def _dispatcher(transport: object) -> SmsDispatcher:
    return SmsDispatcher(transport, StaticPermissionProbe(), timer=RecordingTimer())  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestHostileAddresses:
    @pytest.mark.parametrize(
        "destination, expected",
        [
            ("++9876543210", "++9876543210"),
            ("98+76543210", "98+76543210"),
            ("٩٨٧٦٥٤٣٢١٠", ""),
            ("+", "+"),
            ("abc", ""),
        ],
    )
    def test_no_surprise_prefix(self, destination: str, expected: str):
        assert normalize_address(destination) == expected

    def test_ascii_only_digits(self):
        # Full-width digits are stripped, not treated as a local number.
        assert normalize_address("９８７６５４３２１０") == ""


class TestTransportExceptions:
    @pytest.mark.parametrize(
        "exc_type", [RuntimeError, ValueError, OSError, TimeoutError, KeyError]
    )
    def test_any_exception_retried_then_failed(self, exc_type: type[Exception]):
        transport = RaisingTransport(exc_type)
        outcome = asyncio.run(
            _dispatcher(transport).dispatch(
                SendRequest(destination="9876543210", body="hi")
            )
        )
        assert isinstance(outcome, SendFailure)
        assert transport.calls == 3

    def test_exception_without_message_still_reported(self):
        class _Silent:
            def send_text(self, address: str, body: str) -> None:
                raise RuntimeError()

        outcome = asyncio.run(
            _dispatcher(_Silent()).dispatch(
                SendRequest(destination="9876543210", body="hi")
            )
        )
        assert outcome.last_error == "RuntimeError"


class TestBridgeBoundary:
    @pytest.mark.parametrize(
        "phone, message",
        [("", ""), ("9876543210", ""), ("   ", "hi"), ("9876543210", "hi")],
    )
    def test_only_bridge_rejections_escape(self, phone: str, message: str):
        module = SMSModule(_dispatcher(RaisingTransport()))
        with pytest.raises(BridgeRejection) as excinfo:
            asyncio.run(module.send_sms(phone, message))
        assert excinfo.value.code == "SMS_ERROR"
        assert excinfo.value.message

    def test_unexpected_dispatcher_error_converted(self):
        class _BrokenDispatcher(SmsDispatcher):
            async def dispatch(self, request, profile=None):  # type: ignore[override]
                raise LookupError("corrupted state")

        module = SMSModule(
            _BrokenDispatcher(RaisingTransport(), StaticPermissionProbe())
        )
        with pytest.raises(BridgeRejection) as excinfo:
            asyncio.run(module.test_sms("9876543210", "hi"))
        assert excinfo.value.message == "Failed to send SMS: corrupted state"
