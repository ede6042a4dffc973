"""CLI application for AWS Glue Data Catalog operations tooling."""

import typer

from glueops.cli.commands.database import db_app

app = typer.Typer(
    help="glueops - AWS Glue Data Catalog operations tooling",
    no_args_is_help=True,
)

app.add_typer(db_app, name="db", help="Ensure Glue Data Catalog databases exist.")


if __name__ == "__main__":
    app()
