"""Console transport: logs instead of sending (dry run)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


class ConsoleTransport:
    """Writes each message to the log and reports success."""

    def __init__(self) -> None:
        self.sent_count = 0

    def send_text(self, address: str, body: str) -> None:
        self.sent_count += 1
        logger.info("[SMS] to=%s length=%d", address, len(body))
        logger.debug("[SMS] body=%s", body)
