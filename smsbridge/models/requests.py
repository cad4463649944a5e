"""Inbound request model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SendRequest(BaseModel):
    """A single SMS to hand to the transport.

    Construction never rejects blank strings; the Dispatcher checks them so
    that blank input surfaces as an invalid-argument failure.
    """

    model_config = ConfigDict(frozen=True)

    destination: str
    body: str

    @property
    def has_destination(self) -> bool:
        return bool(self.destination.strip())

    @property
    def has_body(self) -> bool:
        return bool(self.body.strip())
