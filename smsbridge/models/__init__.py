"""smsbridge data models: all Pydantic v2, all frozen (immutable)."""

from smsbridge.models.outcomes import (
    BatchEntry,
    BatchReport,
    SendFailure,
    SendOutcome,
    SendSuccess,
)
from smsbridge.models.profiles import (
    DEFAULT_PROFILES,
    DIRECT_PROFILE,
    STANDARD_PROFILE,
    TEST_PROFILE,
    DispatchProfile,
    build_profiles,
)
from smsbridge.models.requests import SendRequest

__all__ = [
    # requests
    "SendRequest",
    # outcomes
    "SendSuccess",
    "SendFailure",
    "SendOutcome",
    "BatchEntry",
    "BatchReport",
    # profiles
    "DispatchProfile",
    "STANDARD_PROFILE",
    "DIRECT_PROFILE",
    "TEST_PROFILE",
    "DEFAULT_PROFILES",
    "build_profiles",
]
