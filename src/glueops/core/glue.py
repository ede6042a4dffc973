"""Core domain models for the Glue Data Catalog.

These models represent Glue databases and lookup outcomes in a simple,
immutable form. They are intentionally free of boto3 response types and
UI/CLI concerns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, Union

from glueops.core.errors import RemoteServiceError


@dataclass(frozen=True)
class DatabaseSpec:
    """
    Describes the database to ensure.

    Attributes:
        name: Database name, unique within a catalog.
        description: Optional free-text description attached on create.
        location_uri: Optional storage location (e.g. an S3 prefix).
        parameters: Optional string-to-string properties attached on create.
        catalog_id: Optional catalog scope; None means the caller's account.
    """

    name: str
    description: str | None = None
    location_uri: str | None = None
    parameters: Mapping[str, str] | None = None
    catalog_id: str | None = None

    def __post_init__(self) -> None:
        if self.parameters is not None:
            object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def to_database_input(self) -> dict[str, Any]:
        """Render the Glue `DatabaseInput` shape, omitting absent fields."""
        payload: dict[str, Any] = {"Name": self.name}
        if self.description:
            payload["Description"] = self.description
        if self.location_uri:
            payload["LocationUri"] = self.location_uri
        if self.parameters:
            payload["Parameters"] = dict(self.parameters)
        return payload


@dataclass(frozen=True)
class GlueDatabase:
    """Lightweight representation of a Glue database returned by a lookup."""

    name: str
    catalog_id: str | None = None
    description: str | None = None
    location_uri: str | None = None
    parameters: Mapping[str, str] = field(default_factory=dict)
    create_time: datetime | None = None


@dataclass(frozen=True)
class Found:
    """Lookup outcome: the database exists."""

    database: GlueDatabase


@dataclass(frozen=True)
class NotFound:
    """Lookup outcome: the database does not exist (expected path)."""


@dataclass(frozen=True)
class Failed:
    """Lookup outcome: the call failed for any other reason."""

    error: RemoteServiceError


LookupResult = Union[Found, NotFound, Failed]


@dataclass(frozen=True)
class EnsureResult:
    """
    Outcome of ensuring a database.

    Attributes:
        name: Database name.
        catalog_id: Catalog scope used, if any.
        already_exists: True when the database existed before this invocation.
        created: True when this invocation issued the create call.
        attempts: Poll attempt on which the new database became visible
                  (0 when nothing was created).
        skipped: True when the create step was skipped (dry run or declined).
    """

    name: str
    catalog_id: str | None
    already_exists: bool
    created: bool = False
    attempts: int = 0
    skipped: bool = False
