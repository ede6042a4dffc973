from __future__ import annotations

from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from glueops.core.errors import RemoteServiceError
from glueops.core.glue import (
    DatabaseSpec,
    Failed,
    Found,
    GlueDatabase,
    LookupResult,
    NotFound,
)

_NOT_FOUND_CODE = "EntityNotFoundException"


def _error_code(exc: ClientError) -> str | None:
    return (exc.response or {}).get("Error", {}).get("Code")


def _catalog_kwargs(catalog_id: str | None) -> dict[str, str]:
    # Glue rejects CatalogId=None; omit it to use the caller's account
    return {"CatalogId": catalog_id} if catalog_id else {}


class GlueCatalogAdapter:
    """Adapter around the boto3 Glue Data Catalog database APIs."""

    def __init__(self, client: Any) -> None:
        self.client = client

    def get_database(self, name: str, catalog_id: str | None = None) -> LookupResult:
        """Point lookup of a database; never raises for remote failures."""
        try:
            resp = self.client.get_database(Name=name, **_catalog_kwargs(catalog_id))
        except ClientError as exc:
            if _error_code(exc) == _NOT_FOUND_CODE:
                return NotFound()
            return Failed(RemoteServiceError.from_boto(exc, operation="GetDatabase"))
        except BotoCoreError as exc:
            return Failed(RemoteServiceError.from_boto(exc, operation="GetDatabase"))

        db = resp.get("Database") or {}
        return Found(
            GlueDatabase(
                name=db.get("Name", name),
                catalog_id=db.get("CatalogId"),
                description=db.get("Description"),
                location_uri=db.get("LocationUri"),
                parameters=db.get("Parameters") or {},
                create_time=db.get("CreateTime"),
            )
        )

    def create_database(self, spec: DatabaseSpec) -> None:
        """Create the database described by spec."""
        try:
            self.client.create_database(
                DatabaseInput=spec.to_database_input(),
                **_catalog_kwargs(spec.catalog_id),
            )
        except (ClientError, BotoCoreError) as exc:
            raise RemoteServiceError.from_boto(exc, operation="CreateDatabase") from exc
