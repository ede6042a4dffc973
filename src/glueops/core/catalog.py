"""Ensure-database orchestration and output assembly.

This module holds the domain flow for "make sure this Glue database exists":
one existence lookup, an optional create, and the post-create availability
poll. It is free of CLI concerns so it can be reused by other frontends and
tested against a fake adapter.
"""

from __future__ import annotations

import time
from typing import Callable, Protocol

from glueops.core.config import PollSettings
from glueops.core.errors import DatabaseConflictError
from glueops.core.glue import DatabaseSpec, EnsureResult, Failed, Found, LookupResult
from glueops.core.waiters import WaitCallback, wait_for_database


class CatalogAdapter(Protocol):
    """Interface for the Glue database operations used by the core domain."""

    def get_database(self, name: str, catalog_id: str | None = None) -> LookupResult:
        """Return Found, NotFound or Failed for the named database."""
        ...

    def create_database(self, spec: DatabaseSpec) -> None:
        """Create the database; raise RemoteServiceError on failure."""
        ...


def ensure_database(
    adapter: CatalogAdapter,
    spec: DatabaseSpec,
    *,
    if_not_exists: bool = True,
    settings: PollSettings | None = None,
    sleep: Callable[[float], None] = time.sleep,
    on_wait: WaitCallback | None = None,
    approve_create: Callable[[DatabaseSpec], bool] | None = None,
    dry_run: bool = False,
) -> EnsureResult:
    """
    Make sure the database described by spec exists.

    Args:
        adapter: Catalog adapter used for lookup and create.
        spec: Database to ensure.
        if_not_exists: Tolerate an existing database instead of failing.
        settings: Poll bounds for the post-create availability check.
        sleep: Sleep function handed to the poller.
        on_wait: Poll progress callback handed to the poller.
        approve_create: Optional gate asked right before the create call;
                        returning False skips the create.
        dry_run: Run the lookup and branching but never create.

    Returns:
        EnsureResult describing what happened.

    Raises:
        DatabaseConflictError: The database exists and if_not_exists is False.
        RemoteServiceError: Lookup or create failed.
        VisibilityTimeoutError: Created, but never became visible.
    """
    settings = settings or PollSettings()

    lookup = adapter.get_database(spec.name, catalog_id=spec.catalog_id)
    if isinstance(lookup, Failed):
        raise lookup.error

    if isinstance(lookup, Found):
        if not if_not_exists:
            raise DatabaseConflictError(spec.name)
        return EnsureResult(name=spec.name, catalog_id=spec.catalog_id, already_exists=True)

    skipped = dry_run or (approve_create is not None and not approve_create(spec))
    if skipped:
        return EnsureResult(
            name=spec.name,
            catalog_id=spec.catalog_id,
            already_exists=False,
            skipped=True,
        )

    # no retry around create: a failed create ends the invocation
    adapter.create_database(spec)

    attempts = wait_for_database(
        adapter,
        spec.name,
        catalog_id=spec.catalog_id,
        max_attempts=settings.max_attempts,
        delay_ms=settings.delay_ms,
        sleep=sleep,
        on_wait=on_wait,
    )
    return EnsureResult(
        name=spec.name,
        catalog_id=spec.catalog_id,
        already_exists=False,
        created=True,
        attempts=attempts,
    )


def database_arn(
    name: str,
    *,
    region: str,
    account_id: str | None = None,
    catalog_id: str | None = None,
    partition: str = "aws",
) -> str:
    """Build the database ARN from a template (it is not read back from Glue)."""
    account = catalog_id or account_id or "*"
    return f"arn:{partition}:glue:{region}:{account}:database/{name}"


def build_outputs(
    result: EnsureResult,
    *,
    region: str,
    account_id: str | None = None,
) -> dict[str, str]:
    """Return the string outputs reported for an ensure invocation."""
    return {
        "database-name": result.name,
        "database-arn": database_arn(
            result.name,
            region=region,
            account_id=account_id,
            catalog_id=result.catalog_id,
        ),
        "already-exists": "true" if result.already_exists else "false",
    }
