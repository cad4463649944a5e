"""Error taxonomy for SMS dispatch.

Every failure the Dispatcher can surface maps to one ``ErrorKind``.  Only
``TRANSIENT_SEND_FAILURE`` is retried; the rest are preconditions and are
raised immediately.  Each kind also carries the code the bridge module
uses when it rejects a call.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Classification of dispatch failures."""

    INVALID_ARGUMENT = "invalid_argument"
    PERMISSION_DENIED = "permission_denied"
    TRANSIENT_SEND_FAILURE = "transient_send_failure"
    PERMISSION_QUERY_FAILED = "permission_query_failed"


SMS_ERROR = "SMS_ERROR"
PERMISSION_CHECK_ERROR = "PERMISSION_CHECK_ERROR"

BRIDGE_CODES: dict[ErrorKind, str] = {
    ErrorKind.INVALID_ARGUMENT: SMS_ERROR,
    ErrorKind.PERMISSION_DENIED: SMS_ERROR,
    ErrorKind.TRANSIENT_SEND_FAILURE: SMS_ERROR,
    ErrorKind.PERMISSION_QUERY_FAILED: PERMISSION_CHECK_ERROR,
}


class SmsBridgeError(RuntimeError):
    """Base class for every error raised by the dispatch layer."""

    kind: ErrorKind = ErrorKind.TRANSIENT_SEND_FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def bridge_code(self) -> str:
        """The rejection code reported across the bridge boundary."""
        return BRIDGE_CODES[self.kind]


class InvalidArgumentError(SmsBridgeError):
    """Raised when the destination or body is empty after trimming."""

    kind = ErrorKind.INVALID_ARGUMENT


class PermissionDeniedError(SmsBridgeError):
    """Raised when the host has not granted SMS send permission."""

    kind = ErrorKind.PERMISSION_DENIED


class PermissionQueryError(SmsBridgeError):
    """Raised when the permission probe itself fails."""

    kind = ErrorKind.PERMISSION_QUERY_FAILED


class TransportSendError(SmsBridgeError):
    """Raised by transport backends when the host refuses a message."""

    kind = ErrorKind.TRANSIENT_SEND_FAILURE
