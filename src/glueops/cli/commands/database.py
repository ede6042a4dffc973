"""Commands for managing Glue Data Catalog databases."""

from __future__ import annotations

from dataclasses import replace
from typing import NoReturn

import typer

from glueops.cli.common.actions import error_command, in_github_actions, write_outputs
from glueops.cli.common.context import GlueAppContext, build_glue_context
from glueops.cli.common.exits import exit_from_exc
from glueops.cli.common.options import (
    CatalogIdOpt,
    ConfirmOpt,
    DatabaseNameOpt,
    DescriptionOpt,
    DryRunOpt,
    IfNotExistsOpt,
    LocationUriOpt,
    MaxAttemptsOpt,
    ParametersOpt,
    PollDelayOpt,
    ProfileOpt,
    RegionOpt,
)
from glueops.cli.common.output import out
from glueops.core.catalog import build_outputs, ensure_database
from glueops.core.config import PollSettings, ambient_account_id, ambient_region
from glueops.core.errors import (
    GlueOpsError,
    InputValidationError,
    RemoteServiceError,
    VisibilityTimeoutError,
)
from glueops.core.glue import DatabaseSpec
from glueops.core.inputs import build_database_spec, parse_if_not_exists

db_app = typer.Typer(
    help="Glue Data Catalog database operations.",
    no_args_is_help=False,
    invoke_without_command=True,
)


@db_app.callback()
def _init(ctx: typer.Context):
    """Show help when no database command is given."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def _fail(exc: Exception, *, code: int = 1) -> NoReturn:
    """Print diagnostics for exc and exit with a single terminal failure line."""
    if isinstance(exc, RemoteServiceError):
        out.error("AWS SDK Error Details:")
        out.kv(exc.details())
    if isinstance(exc, VisibilityTimeoutError):
        out.warn("The create call succeeded; the database most likely exists.")

    message = f"Action failed: {exc}"
    if in_github_actions():
        typer.echo(error_command(message))
    exit_from_exc(exc, message=message, code=code)


def _on_wait(attempt: int, max_attempts: int, delay_ms: int) -> None:
    out.info(
        f"Database not yet available (attempt {attempt}/{max_attempts}), "
        f"waiting {delay_ms}ms..."
    )


def _confirm_create(spec: DatabaseSpec) -> bool:
    out.database_table(spec, title="Database to create")
    return out.confirm(f"Create Glue database '{spec.name}'?")


@db_app.command("create")
def create(
    ctx: typer.Context,
    database_name: str = DatabaseNameOpt,
    description: str | None = DescriptionOpt,
    location_uri: str | None = LocationUriOpt,
    parameters: str | None = ParametersOpt,
    catalog_id: str | None = CatalogIdOpt,
    if_not_exists: str = IfNotExistsOpt,
    max_attempts: int | None = MaxAttemptsOpt,
    poll_delay_ms: int | None = PollDelayOpt,
    confirm: bool = ConfirmOpt,
    dry_run: bool = DryRunOpt,
    profile: str | None = ProfileOpt,
    region: str | None = RegionOpt,
):
    """
    Create a Glue database unless it already exists.
    """
    try:
        spec = build_database_spec(
            name=database_name,
            description=description,
            location_uri=location_uri,
            parameters=parameters,
            catalog_id=catalog_id,
        )
    except InputValidationError as exc:
        _fail(exc, code=2)

    # inputs are validated before any AWS client is configured
    ctx.obj = build_glue_context(profile, region)
    appctx: GlueAppContext = ctx.obj

    tolerate = parse_if_not_exists(if_not_exists)
    settings = PollSettings.from_env()
    if max_attempts is not None:
        settings = replace(settings, max_attempts=max_attempts)
    if poll_delay_ms is not None:
        settings = replace(settings, delay_ms=poll_delay_ms)

    out.info(f"Creating Glue database: {spec.name}")
    out.info(f"If-not-exists mode: {str(tolerate).lower()}")
    out.info("Checking if database already exists...")

    try:
        result = ensure_database(
            appctx.adapter,
            spec,
            if_not_exists=tolerate,
            settings=settings,
            on_wait=_on_wait,
            approve_create=_confirm_create if confirm else None,
            dry_run=dry_run,
        )
    except GlueOpsError as exc:
        _fail(exc)

    if result.already_exists:
        out.info("Database already exists")
        out.info("if-not-exists=true: Silently succeeding without error")
    elif result.skipped:
        if dry_run:
            out.warn(f"DRY RUN: database {spec.name} does not exist and would be created.")
        else:
            out.warn("Cancelled.")
        raise typer.Exit(0)
    else:
        out.success("Database created successfully")
        out.success(f"Database verified available after {result.attempts} attempt(s)")

    outputs = build_outputs(
        result,
        region=appctx.region or ambient_region(),
        account_id=ambient_account_id(),
    )
    out.header("Outputs")
    out.kv(outputs)
    write_outputs(outputs)

    status = "already exists" if result.already_exists else "created"
    out.success(f"Action completed successfully - database {spec.name} {status}")
