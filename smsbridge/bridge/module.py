"""SMSModule: the operation surface exposed to a calling application.

Four named operations are exported: ``sendSMS``, ``sendSMSDirect``,
``testSMS`` and ``checkSMSPermission``.  Results are plain dicts so they
marshal directly across a bridge; every failure is converted into a
``BridgeRejection`` carrying a ``(code, message)`` pair.

Usage
-----
>>> module = SMSModule(dispatcher)
>>> await module.send_sms("9876543210", "hello")
{'success': True, 'message': 'SMS sent successfully', 'phone': '+919876543210'}
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from smsbridge.core.dispatcher import SmsDispatcher
from smsbridge.core.errors import (
    PERMISSION_CHECK_ERROR,
    SMS_ERROR,
    PermissionQueryError,
    SmsBridgeError,
)
from smsbridge.models.outcomes import SendFailure
from smsbridge.models.profiles import DEFAULT_PROFILES, DispatchProfile
from smsbridge.models.requests import SendRequest

logger = logging.getLogger(__name__)


class BridgeRejection(Exception):
    """The rejected result of a bridge operation."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class SMSModule:
    """Bridge between a calling application and an ``SmsDispatcher``.

    Parameters
    ----------
    dispatcher:
        The dispatcher every send operation delegates to.
    profiles:
        Profiles keyed ``"standard"``, ``"direct"`` and ``"test"``.
        Defaults to the built-in profiles.
    """

    name = "SMSModule"

    def __init__(
        self,
        dispatcher: SmsDispatcher,
        profiles: dict[str, DispatchProfile] | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._profiles = dict(profiles or DEFAULT_PROFILES)

    @property
    def dispatcher(self) -> SmsDispatcher:
        return self._dispatcher

    def profile(self, name: str) -> DispatchProfile:
        """Return the profile registered under *name*."""
        return self._profiles[name]

    def exported_methods(self) -> dict[str, Callable[..., Awaitable[dict[str, Any]]]]:
        """Return the operations keyed by the names the front-end calls."""
        return {
            "sendSMS": self.send_sms,
            "sendSMSDirect": self.send_sms_direct,
            "testSMS": self.test_sms,
            "checkSMSPermission": self.check_sms_permission,
        }

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def send_sms(self, phone_number: str, message: str) -> dict[str, Any]:
        """Send with retries (standard profile)."""
        return await self._send(phone_number, message, self._profiles["standard"])

    async def send_sms_direct(self, phone_number: str, message: str) -> dict[str, Any]:
        """Send once with a short settle wait (direct profile)."""
        return await self._send(phone_number, message, self._profiles["direct"])

    async def test_sms(self, phone_number: str, message: str) -> dict[str, Any]:
        """Send once and report as a test message (test profile)."""
        return await self._send(phone_number, message, self._profiles["test"])

    async def check_sms_permission(self) -> dict[str, bool]:
        """Report whether SMS sending is currently permitted."""
        try:
            return {"hasPermission": self._dispatcher.check_permission()}
        except PermissionQueryError as exc:
            raise BridgeRejection(PERMISSION_CHECK_ERROR, exc.message) from exc
        except Exception as exc:  # noqa: BLE001
            logger.error("Error checking SMS permission: %s", exc)
            raise BridgeRejection(
                PERMISSION_CHECK_ERROR, f"Failed to check SMS permission: {exc}"
            ) from exc

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _send(
        self, phone_number: str, message: str, profile: DispatchProfile
    ) -> dict[str, Any]:
        logger.info("%s send requested to %s", profile.name, phone_number)
        request = SendRequest(destination=phone_number or "", body=message or "")
        try:
            outcome = await self._dispatcher.dispatch(request, profile)
        except PermissionQueryError as exc:
            # Only check_sms_permission reports PERMISSION_CHECK_ERROR.
            cause = exc.__cause__ or exc
            logger.error("Error sending SMS: %s", cause)
            raise BridgeRejection(SMS_ERROR, f"Failed to send SMS: {cause}") from exc
        except SmsBridgeError as exc:
            raise BridgeRejection(exc.bridge_code, exc.message) from exc
        except Exception as exc:  # noqa: BLE001
            logger.error("Error sending SMS: %s", exc)
            raise BridgeRejection(SMS_ERROR, f"Failed to send SMS: {exc}") from exc

        if isinstance(outcome, SendFailure):
            raise BridgeRejection(SMS_ERROR, outcome.reason)

        return {
            "success": True,
            "message": outcome.message,
            "phone": outcome.normalized_address,
        }
