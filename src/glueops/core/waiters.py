"""Availability polling for newly created databases.

Glue can lag between a successful CreateDatabase and the database being
visible to GetDatabase. The poller here absorbs that window with a bounded,
fixed-delay loop. It is synchronous and takes the sleep function as a
parameter so tests can exercise the exhaustion path without waiting.
"""

from __future__ import annotations

import time
from typing import Callable, Protocol

from glueops.core.config import DEFAULT_DELAY_MS, DEFAULT_MAX_ATTEMPTS
from glueops.core.errors import VisibilityTimeoutError
from glueops.core.glue import Failed, Found, LookupResult

WaitCallback = Callable[[int, int, int], None]


class DatabaseLookup(Protocol):
    """Interface for the point lookup used by the poller."""

    def get_database(self, name: str, catalog_id: str | None = None) -> LookupResult:
        """Return Found, NotFound or Failed for the named database."""
        ...


def wait_for_database(
    adapter: DatabaseLookup,
    name: str,
    *,
    catalog_id: str | None = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    delay_ms: int = DEFAULT_DELAY_MS,
    sleep: Callable[[float], None] = time.sleep,
    on_wait: WaitCallback | None = None,
) -> int:
    """
    Block until a database is visible to lookups.

    Args:
        adapter: Catalog adapter used for lookups.
        name: Database name to look up.
        catalog_id: Optional catalog scope.
        max_attempts: Maximum number of lookups.
        delay_ms: Fixed delay between consecutive lookups, in milliseconds.
        sleep: Sleep function taking seconds.
        on_wait: Called as on_wait(attempt, max_attempts, delay_ms) before
                 each sleep.

    Returns:
        The 1-based attempt on which the database was found.

    Raises:
        VisibilityTimeoutError: If every attempt reported "not found".
        RemoteServiceError: If a lookup failed for any other reason.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be >= 1")
    if delay_ms < 0:
        raise ValueError("delay_ms must be >= 0")

    for attempt in range(1, max_attempts + 1):
        result = adapter.get_database(name, catalog_id=catalog_id)

        if isinstance(result, Found):
            return attempt
        if isinstance(result, Failed):
            raise result.error

        if attempt < max_attempts:
            if on_wait:
                on_wait(attempt, max_attempts, delay_ms)
            sleep(delay_ms / 1000)

    raise VisibilityTimeoutError(name, max_attempts)
