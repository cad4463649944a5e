"""Dispatch outcome models: tagged success/failure results.

A ``SendOutcome`` is only built after the request was validated and the
permission gate was open.  Precondition failures are raised as errors
instead (see ``smsbridge.core.errors``).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from smsbridge.core.errors import ErrorKind


class SendSuccess(BaseModel):
    """The transport accepted the message.

    ``delivery_confirmed`` is always ``False``: success means the transport
    call returned without raising and the settle wait elapsed.  No sent or
    delivered acknowledgment is consumed.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["success"] = "success"
    normalized_address: str
    attempts: int = Field(ge=1)
    message: str = "SMS sent successfully"
    delivery_confirmed: bool = False
    completed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def succeeded(self) -> bool:
        return True


class SendFailure(BaseModel):
    """Every attempt allowed by the profile raised."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["failure"] = "failure"
    reason: str
    attempts: int = Field(ge=1)
    normalized_address: str = ""
    last_error: str = ""
    error_kind: ErrorKind = ErrorKind.TRANSIENT_SEND_FAILURE
    completed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def succeeded(self) -> bool:
        return False


SendOutcome = Annotated[Union[SendSuccess, SendFailure], Field(discriminator="kind")]


class BatchEntry(BaseModel):
    """Result for one recipient of a batch send."""

    model_config = ConfigDict(frozen=True)

    destination: str
    outcome: SendOutcome | None = None
    error_kind: ErrorKind | None = None
    error_message: str = ""

    @property
    def succeeded(self) -> bool:
        return self.outcome is not None and self.outcome.succeeded


class BatchReport(BaseModel):
    """Summary of a multi-recipient send."""

    model_config = ConfigDict(frozen=True)

    results: list[BatchEntry] = []

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def successful(self) -> int:
        return sum(1 for entry in self.results if entry.succeeded)

    @property
    def failed(self) -> int:
        return self.total - self.successful
