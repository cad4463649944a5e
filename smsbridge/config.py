"""Runtime configuration: env-driven.

Centralized settings using pydantic-settings.  Reads from a .env file and
SMSBRIDGE_* environment variables.
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class BridgeSettings(BaseSettings):
    """Bridge configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export SMSBRIDGE_DEFAULT_CALLING_CODE=44
        export SMSBRIDGE_TRANSPORT=termux
        export SMSBRIDGE_LOG_LEVEL=DEBUG

    Or via .env file::

        SMSBRIDGE_MAX_RETRIES=5
        SMSBRIDGE_RETRY_BACKOFF_SECONDS=1.0
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="SMSBRIDGE_",
        env_file_encoding="utf-8",
    )

    # Runtime environment
    environment: str = "development"
    log_level: str = "INFO"
    debug: bool = False

    # Address policy
    default_calling_code: str = "91"

    # Retry and settle policy
    max_retries: int = 3
    retry_backoff_seconds: float = 2.0
    standard_settle_seconds: float = 3.0
    direct_settle_seconds: float = 1.5
    test_settle_seconds: float = 2.0

    # Host capabilities
    transport: str = "console"      # "console", "memory", "termux"
    permission_granted: bool = True  # used by the console and memory probes
    termux_command: str = "termux-sms-send"

    @property
    def is_production(self) -> bool:
        """Whether running in production mode."""
        return self.environment == "production"


# Module-level singleton: import as `from smsbridge.config import settings`
settings = BridgeSettings()
