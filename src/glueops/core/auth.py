"""Authentication helpers for AWS Glue.

This module centralizes creation of the boto3 Glue client and turns the
configuration failures botocore raises while resolving profiles and regions
into a single user-facing AuthError.
"""

from __future__ import annotations

import boto3
from botocore.exceptions import BotoCoreError, NoRegionError, ProfileNotFound


class AuthError(RuntimeError):
    """Raised when an AWS session or client cannot be configured."""


def _format_auth_error(exc: Exception, profile: str | None) -> str:
    """Return a user-friendly auth error message."""
    if isinstance(exc, ProfileNotFound):
        return (
            f"AWS profile '{profile}' was not found.\n"
            "Configure it with:\n"
            f"  $ aws configure --profile {profile}"
        )
    if isinstance(exc, NoRegionError):
        return "No AWS region configured. Pass --region or set AWS_REGION."
    return f"AWS client configuration failed: {exc}"


def _clean(value: str | None) -> str | None:
    """Treat empty or whitespace-only values as unset."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def get_client(profile: str | None = None, region: str | None = None):
    """
    Create and return a boto3 Glue client.

    If a profile is provided it is resolved through the standard AWS shared
    config/credentials files; otherwise boto3's default credential chain is
    used. Credentials themselves are only checked on the first API call.
    """
    profile = _clean(profile)
    region = _clean(region)
    try:
        session = boto3.session.Session(profile_name=profile, region_name=region)
        return session.client("glue")
    except BotoCoreError as exc:
        raise AuthError(_format_auth_error(exc, profile)) from exc
