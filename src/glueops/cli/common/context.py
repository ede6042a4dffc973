"""Application context management for the CLI."""

from dataclasses import dataclass
from typing import Any

from glueops.cli.common.exits import die
from glueops.core.adapters.glue import GlueCatalogAdapter
from glueops.core.auth import AuthError, get_client


@dataclass
class GlueAppContext:
    """Application context holding the Glue client and catalog adapter."""

    profile: str | None
    region: str | None
    client: Any
    adapter: GlueCatalogAdapter


def build_glue_context(profile: str | None, region: str | None) -> GlueAppContext:
    """Build and return the application context for Glue commands.

    Args:
        profile: Optional AWS profile name to use for authentication.
        region: Optional AWS region; boto3 resolution applies when None.

    Returns:
        GlueAppContext: Application context with configured client and adapter.
    """
    try:
        client = get_client(profile, region)
    except AuthError as exc:
        die(str(exc), code=1)
    adapter = GlueCatalogAdapter(client)
    return GlueAppContext(profile=profile, region=region, client=client, adapter=adapter)
