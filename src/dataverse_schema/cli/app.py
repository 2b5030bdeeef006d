from typing import Optional

import typer

from dataverse_schema.config import get_config
from dataverse_schema.utils import setup_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import dataverse_schema

        typer.echo(f"dataverse-schema version: {dataverse_schema.__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="dataverse-schema",
    help="Generate JSON Schema documents from Dataverse customizations.xml",
)


@app.callback()
def app_callback(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log to the console as well as the configured log file.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Dataverse Schema Generator - customizations.xml to JSON Schema."""
    config = get_config()
    setup_logging(log_level=config.log_level, log_file=config.log_file, console=verbose)
