"""Error types raised by the glueops core.

Every failure that ends an invocation derives from GlueOpsError so the CLI
can render it with a single handler. Remote failures keep the structured
detail that botocore attaches (error code, HTTP status, request id).
"""

from __future__ import annotations

from typing import Any

from botocore.exceptions import BotoCoreError, ClientError


class GlueOpsError(RuntimeError):
    """Base class for all glueops failures."""


class InputValidationError(GlueOpsError, ValueError):
    """Raised when invocation inputs are malformed (before any network call)."""


class DatabaseConflictError(GlueOpsError):
    """Raised when the database exists and existing databases are not tolerated."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Database {name} already exists and if-not-exists=false")


class VisibilityTimeoutError(GlueOpsError):
    """
    Raised when a created database never showed up in lookups.

    The create call itself succeeded; only read-after-write visibility lagged,
    so the database most likely exists.
    """

    def __init__(self, name: str, attempts: int):
        self.name = name
        self.attempts = attempts
        super().__init__(
            f"Database {name} was created but failed to become available "
            f"after {attempts} attempts"
        )


class RemoteServiceError(GlueOpsError):
    """A Glue API call failed for a reason other than "not found"."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        code: str | None = None,
        http_status: int | None = None,
        request_id: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.operation = operation
        self.code = code
        self.http_status = http_status
        self.request_id = request_id

    @classmethod
    def from_boto(
        cls, exc: ClientError | BotoCoreError, *, operation: str | None = None
    ) -> "RemoteServiceError":
        """Build an error from a botocore exception, keeping its metadata."""
        if isinstance(exc, ClientError):
            response: dict[str, Any] = exc.response or {}
            error = response.get("Error") or {}
            meta = response.get("ResponseMetadata") or {}
            err = cls(
                error.get("Message") or str(exc),
                operation=operation or getattr(exc, "operation_name", None),
                code=error.get("Code"),
                http_status=meta.get("HTTPStatusCode"),
                request_id=meta.get("RequestId"),
            )
        else:
            err = cls(str(exc), operation=operation)
        err.__cause__ = exc
        return err

    def details(self) -> dict[str, str]:
        """Return the diagnostic fields that are present, for display."""
        items = {
            "Operation": self.operation,
            "Error Code": self.code,
            "HTTP Status": self.http_status,
            "Request ID": self.request_id,
            "Message": self.message,
        }
        return {k: str(v) for k, v in items.items() if v is not None}
