"""SmsDispatcher: bounded-retry, permission-gated SMS dispatch.

Each call walks a fixed, linear sequence of states::

    VALIDATING -> PERMISSION_CHECKING -> NORMALIZING -> ATTEMPTING(n)
        -> SUCCEEDED | FAILED

No state is re-entered.  ``ATTEMPTING`` loops on itself while attempts
remain and the transport keeps raising.

Precondition failures (blank input, permission denied, probe error) are
raised.  Transport failures are retried and, once exhausted, returned as a
``SendFailure``.  Success is declared when the transport call returns and
the settle wait has elapsed; no delivery acknowledgment is awaited.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from enum import Enum

from smsbridge.core.errors import (
    InvalidArgumentError,
    PermissionDeniedError,
    PermissionQueryError,
    SmsBridgeError,
)
from smsbridge.core.normalizer import DEFAULT_CALLING_CODE, normalize_address
from smsbridge.core.timer import AsyncioTimer, Timer
from smsbridge.models.outcomes import (
    BatchEntry,
    BatchReport,
    SendFailure,
    SendOutcome,
    SendSuccess,
)
from smsbridge.models.profiles import STANDARD_PROFILE, DispatchProfile
from smsbridge.models.requests import SendRequest
from smsbridge.platform import PermissionProbe, SmsTransport

logger = logging.getLogger(__name__)

PERMISSION_HINT = (
    "SMS permission not granted. Please grant SMS permission in app settings."
)


class DispatchState(str, Enum):
    """Linear states of a single dispatch."""

    VALIDATING = "validating"
    PERMISSION_CHECKING = "permission_checking"
    NORMALIZING = "normalizing"
    ATTEMPTING = "attempting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SmsDispatcher:
    """Dispatches SMS through a host transport behind a permission gate.

    Parameters
    ----------
    transport:
        The host messaging capability.
    permission_probe:
        Queried on every dispatch; the answer is never cached.
    timer:
        Suspension primitive for backoff and settle waits.  Defaults to
        ``AsyncioTimer``.
    default_calling_code:
        Calling code applied to bare local numbers.
    default_profile:
        Profile used when ``dispatch`` is called without one.
    """

    def __init__(
        self,
        transport: SmsTransport,
        permission_probe: PermissionProbe,
        *,
        timer: Timer | None = None,
        default_calling_code: str = DEFAULT_CALLING_CODE,
        default_profile: DispatchProfile = STANDARD_PROFILE,
    ) -> None:
        self._transport = transport
        self._permission_probe = permission_probe
        self._timer: Timer = timer or AsyncioTimer()
        self._default_calling_code = default_calling_code
        self._default_profile = default_profile

    @property
    def transport(self) -> SmsTransport:
        return self._transport

    @property
    def default_calling_code(self) -> str:
        return self._default_calling_code

    @property
    def default_profile(self) -> DispatchProfile:
        return self._default_profile

    # ------------------------------------------------------------------
    # Permission
    # ------------------------------------------------------------------

    def check_permission(self) -> bool:
        """Return whether the host currently allows sending SMS.

        Raises
        ------
        PermissionQueryError
            If the probe itself raises.
        """
        try:
            return bool(self._permission_probe.has_send_permission())
        except Exception as exc:  # noqa: BLE001
            logger.error("Permission probe failed: %s", exc)
            raise PermissionQueryError(
                f"Failed to check SMS permission: {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def normalize(self, destination: str) -> str:
        """Normalize *destination* with this dispatcher's calling code."""
        return normalize_address(destination, self._default_calling_code)

    async def dispatch(
        self, request: SendRequest, profile: DispatchProfile | None = None
    ) -> SendOutcome:
        """Send *request* under *profile* and return the outcome.

        Raises
        ------
        InvalidArgumentError
            If the destination or body is blank.  No transport call is made.
        PermissionDeniedError
            If the permission probe reports not granted.  No transport call
            is made.
        PermissionQueryError
            If the permission probe raises.
        """
        profile = profile or self._default_profile

        self._enter(DispatchState.VALIDATING, profile)
        if not request.has_destination:
            raise InvalidArgumentError("Phone number is required")
        if not request.has_body:
            raise InvalidArgumentError("Message is required")

        self._enter(DispatchState.PERMISSION_CHECKING, profile)
        if not self.check_permission():
            logger.error("SMS permission not granted")
            raise PermissionDeniedError(PERMISSION_HINT)

        self._enter(DispatchState.NORMALIZING, profile)
        address = self.normalize(request.destination)
        logger.debug("Normalized %r to %s", request.destination, address)

        return await self._attempt(address, request.body, profile)

    async def _attempt(
        self, address: str, body: str, profile: DispatchProfile
    ) -> SendOutcome:
        last_error = ""
        for attempt in range(1, profile.max_attempts + 1):
            self._enter(DispatchState.ATTEMPTING, profile, attempt=attempt)
            logger.info(
                "SMS attempt %d of %d to %s (%d chars)",
                attempt,
                profile.max_attempts,
                address,
                len(body),
            )
            try:
                await asyncio.to_thread(self._transport.send_text, address, body)
            except Exception as exc:  # noqa: BLE001
                last_error = str(exc) or exc.__class__.__name__
                logger.error("SMS attempt %d failed: %s", attempt, last_error)
                if attempt < profile.max_attempts:
                    logger.info(
                        "Retrying SMS in %.1f seconds", profile.retry_backoff_seconds
                    )
                    await self._timer.sleep(profile.retry_backoff_seconds)
                continue

            await self._timer.sleep(profile.settle_wait_seconds)
            self._enter(DispatchState.SUCCEEDED, profile, attempt=attempt)
            logger.info("SMS sent to %s (attempt %d)", address, attempt)
            return SendSuccess(
                normalized_address=address,
                attempts=attempt,
                message=profile.success_message,
            )

        self._enter(DispatchState.FAILED, profile, attempt=profile.max_attempts)
        return SendFailure(
            reason=profile.format_failure(profile.max_attempts, last_error),
            attempts=profile.max_attempts,
            normalized_address=address,
            last_error=last_error,
        )

    async def dispatch_many(
        self,
        requests: Iterable[SendRequest],
        profile: DispatchProfile | None = None,
    ) -> BatchReport:
        """Dispatch each request in turn and summarize the results.

        A precondition failure for one recipient is recorded in its entry
        and does not stop the remaining sends.
        """
        entries: list[BatchEntry] = []
        for request in requests:
            try:
                outcome = await self.dispatch(request, profile)
            except SmsBridgeError as exc:
                logger.warning(
                    "Batch entry %r rejected: %s", request.destination, exc.message
                )
                entries.append(
                    BatchEntry(
                        destination=request.destination,
                        error_kind=exc.kind,
                        error_message=exc.message,
                    )
                )
                continue
            entries.append(BatchEntry(destination=request.destination, outcome=outcome))

        report = BatchReport(results=entries)
        logger.info(
            "Batch complete: %d/%d sent, %d failed",
            report.successful,
            report.total,
            report.failed,
        )
        return report

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _enter(
        state: DispatchState, profile: DispatchProfile, attempt: int | None = None
    ) -> None:
        if attempt is None:
            logger.debug("dispatch[%s] -> %s", profile.name, state.value)
        else:
            logger.debug(
                "dispatch[%s] -> %s(%d)", profile.name, state.value, attempt
            )
