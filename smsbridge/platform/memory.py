"""In-memory transport and static permission probe.

Nothing leaves the process.  Sent messages are buffered for inspection and
failures can be scripted, which makes this the backend for tests.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from smsbridge.core.errors import TransportSendError

logger = logging.getLogger(__name__)


class SentMessage(BaseModel):
    """A message accepted by the in-memory transport."""

    model_config = ConfigDict(frozen=True)

    address: str
    body: str


class InMemoryTransport:
    """Records every ``send_text`` call.

    Parameters
    ----------
    fail_first:
        Number of initial calls that raise before calls start succeeding.
    always_fail:
        When ``True`` every call raises.
    error_message:
        Text of the raised ``TransportSendError``.
    """

    def __init__(
        self,
        fail_first: int = 0,
        *,
        always_fail: bool = False,
        error_message: str = "Generic failure",
    ) -> None:
        self._fail_first = fail_first
        self._always_fail = always_fail
        self._error_message = error_message
        self.calls: list[SentMessage] = []
        self._sent: list[SentMessage] = []

    @property
    def call_count(self) -> int:
        """Number of ``send_text`` invocations, failed ones included."""
        return len(self.calls)

    @property
    def sent(self) -> list[SentMessage]:
        """Messages that were accepted."""
        return list(self._sent)

    def send_text(self, address: str, body: str) -> None:
        message = SentMessage(address=address, body=body)
        self.calls.append(message)
        if self._always_fail or len(self.calls) <= self._fail_first:
            logger.debug(
                "InMemoryTransport: scripted failure on call %d", len(self.calls)
            )
            raise TransportSendError(self._error_message)
        self._sent.append(message)

    def flush(self) -> list[SentMessage]:
        """Return and clear accepted messages."""
        sent = list(self._sent)
        self._sent.clear()
        return sent


class StaticPermissionProbe:
    """A permission probe with a fixed, externally mutable answer."""

    def __init__(self, granted: bool = True) -> None:
        self.granted = granted

    def has_send_permission(self) -> bool:
        return self.granted
