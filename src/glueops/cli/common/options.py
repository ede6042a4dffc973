"""Common CLI options for the CLI.

Action inputs are also read from the `INPUT_*` variables a GitHub Actions
runner sets, so the same command works as a workflow step.
"""

import typer

ProfileOpt = typer.Option(
    None,
    "--profile",
    "-p",
    envvar="AWS_PROFILE",
    help="AWS named profile (from ~/.aws/config)",
)

RegionOpt = typer.Option(
    None,
    "--region",
    envvar="AWS_REGION",
    help="AWS region of the Glue Data Catalog",
)

DatabaseNameOpt = typer.Option(
    ...,
    "--database-name",
    "-d",
    envvar="INPUT_DATABASE-NAME",
    help="Name of the Glue database",
)

DescriptionOpt = typer.Option(
    None,
    "--description",
    envvar="INPUT_DESCRIPTION",
    help="Description attached when the database is created",
)

LocationUriOpt = typer.Option(
    None,
    "--location-uri",
    envvar="INPUT_LOCATION-URI",
    help="Storage location URI (e.g. s3://bucket/prefix/)",
)

ParametersOpt = typer.Option(
    None,
    "--parameters",
    envvar="INPUT_PARAMETERS",
    help='Database parameters as a JSON object, e.g. \'{"owner": "data"}\'',
)

CatalogIdOpt = typer.Option(
    None,
    "--catalog-id",
    envvar="INPUT_CATALOG-ID",
    help="Catalog ID (defaults to the caller's AWS account)",
)

IfNotExistsOpt = typer.Option(
    "true",
    "--if-not-exists",
    envvar="INPUT_IF-NOT-EXISTS",
    help='Succeed if the database already exists (any value but "false")',
)

MaxAttemptsOpt = typer.Option(
    None,
    "--max-attempts",
    min=1,
    help="Lookups to wait for a new database to appear [env: GLUEOPS_POLL_MAX_ATTEMPTS]",
)

PollDelayOpt = typer.Option(
    None,
    "--poll-delay-ms",
    min=0,
    help="Delay between lookups in milliseconds [env: GLUEOPS_POLL_DELAY_MS]",
)

ConfirmOpt = typer.Option(
    False,
    "--confirm/--no-confirm",
    help="Ask for confirmation before creating the database",
)

DryRunOpt = typer.Option(
    False,
    "--dry-run",
    help="Check whether the database exists, but don't create anything",
)
