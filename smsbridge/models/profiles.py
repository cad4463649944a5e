"""Dispatch profiles: the retry and settle policy of one send variant.

The three inbound send operations differ only in how many attempts they
make, how long they wait, and the text they report.  Each is a
``DispatchProfile`` applied to the same Dispatcher.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from smsbridge.config import BridgeSettings


class DispatchProfile(BaseModel):
    """Attempt count, waits, and reporting text for one send variant."""

    model_config = ConfigDict(frozen=True)

    name: str
    max_attempts: int = Field(default=3, ge=1)
    settle_wait_seconds: float = Field(default=3.0, ge=0)
    retry_backoff_seconds: float = Field(default=2.0, ge=0)
    success_message: str = "SMS sent successfully"
    # Formatted with ``attempts`` and ``error``.
    failure_message: str = "Failed to send SMS after {attempts} attempts"

    def format_failure(self, attempts: int, error: str) -> str:
        return self.failure_message.format(attempts=attempts, error=error)


STANDARD_PROFILE = DispatchProfile(name="standard")

DIRECT_PROFILE = DispatchProfile(
    name="direct",
    max_attempts=1,
    settle_wait_seconds=1.5,
    failure_message="Direct SMS failed: {error}",
)

TEST_PROFILE = DispatchProfile(
    name="test",
    max_attempts=1,
    settle_wait_seconds=2.0,
    success_message="Test SMS sent successfully",
    failure_message="Test SMS failed: {error}",
)

DEFAULT_PROFILES: dict[str, DispatchProfile] = {
    p.name: p for p in (STANDARD_PROFILE, DIRECT_PROFILE, TEST_PROFILE)
}


def build_profiles(settings: BridgeSettings) -> dict[str, DispatchProfile]:
    """Derive the three built-in profiles from runtime settings."""
    return {
        "standard": STANDARD_PROFILE.model_copy(
            update={
                "max_attempts": settings.max_retries,
                "settle_wait_seconds": settings.standard_settle_seconds,
                "retry_backoff_seconds": settings.retry_backoff_seconds,
            }
        ),
        "direct": DIRECT_PROFILE.model_copy(
            update={"settle_wait_seconds": settings.direct_settle_seconds}
        ),
        "test": TEST_PROFILE.model_copy(
            update={"settle_wait_seconds": settings.test_settle_seconds}
        ),
    }
