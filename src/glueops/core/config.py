"""Environment-driven settings for glueops."""

from __future__ import annotations

import os
from dataclasses import dataclass

MAX_ATTEMPTS_ENV = "GLUEOPS_POLL_MAX_ATTEMPTS"
DELAY_MS_ENV = "GLUEOPS_POLL_DELAY_MS"
DEFAULT_MAX_ATTEMPTS = 10
DEFAULT_DELAY_MS = 1000
DEFAULT_REGION = "us-east-1"


def _int_from_env(name: str, default: int, *, minimum: int) -> int:
    """Read an integer env var, falling back to default on missing/invalid values."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value >= minimum else default


@dataclass(frozen=True)
class PollSettings:
    """Bounds for the post-create availability poll."""

    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_ms: int = DEFAULT_DELAY_MS

    @classmethod
    def from_env(cls) -> "PollSettings":
        """Build settings from GLUEOPS_POLL_* env vars."""
        return cls(
            max_attempts=_int_from_env(MAX_ATTEMPTS_ENV, DEFAULT_MAX_ATTEMPTS, minimum=1),
            delay_ms=_int_from_env(DELAY_MS_ENV, DEFAULT_DELAY_MS, minimum=0),
        )


def ambient_region() -> str:
    """Region used for reported ARNs when none is given explicitly."""
    return os.getenv("AWS_REGION") or DEFAULT_REGION


def ambient_account_id() -> str | None:
    """Account id used for reported ARNs when no catalog id is given."""
    return os.getenv("AWS_ACCOUNT_ID") or None
