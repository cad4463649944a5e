"""Termux:API transport: sends through the handset's SMS manager.

On Android under Termux, the ``termux-sms-send`` command hands a message to
the system SmsManager.  The command only exists when the Termux:API add-on
is installed, so its presence on PATH is used as the permission signal.
"""

from __future__ import annotations

import logging
import shutil
import subprocess

from smsbridge.core.errors import TransportSendError

logger = logging.getLogger(__name__)


class TermuxTransport:
    """Invokes ``termux-sms-send -n <address> -- <body>``.

    The body follows ``--`` so text starting with a dash is never parsed as
    an option.

    Parameters
    ----------
    command:
        Name or path of the send command.
    timeout:
        Optional per-call timeout in seconds.  ``None`` waits for the
        command to finish.
    """

    def __init__(
        self, command: str = "termux-sms-send", timeout: float | None = None
    ) -> None:
        self._command = command
        self._timeout = timeout

    @property
    def command(self) -> str:
        return self._command

    def send_text(self, address: str, body: str) -> None:
        try:
            result = subprocess.run(
                [self._command, "-n", address, "--", body],
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except (subprocess.SubprocessError, OSError) as exc:
            raise TransportSendError(f"{self._command} could not run: {exc}") from exc

        if result.returncode != 0:
            detail = result.stderr.strip() or result.stdout.strip() or "no output"
            raise TransportSendError(
                f"{self._command} exited with {result.returncode}: {detail}"
            )
        logger.debug("TermuxTransport: handed message to %s", address)


class TermuxPermissionProbe:
    """Reports permission as granted when the send command is on PATH."""

    def __init__(self, command: str = "termux-sms-send") -> None:
        self._command = command

    def has_send_permission(self) -> bool:
        return shutil.which(self._command) is not None
