"""Schema generation commands for dataverse-schema.

Provides `dataverse-schema generate` to write JSON Schema documents for the
entities in a customizations.xml file, and `dataverse-schema entities` to list
what a file contains.
"""

from pathlib import Path
from typing import Annotated, List, Optional

import typer
from loguru import logger
from rich.table import Table

from dataverse_schema.cli.app import app
from dataverse_schema.cli.commands.command_utils import (
    cancel_on_interrupt,
    console,
    parse_entity_names,
)
from dataverse_schema.config import get_config
from dataverse_schema.file_utils import FileError
from dataverse_schema.services import GenerationCancelledError, SchemaGeneratorService


@app.command()
def generate(
    input_path: Annotated[
        Path,
        typer.Option(
            "--input",
            "-i",
            help="Path to the customizations.xml file from a Dataverse solution export",
        ),
    ],
    output_path: Annotated[
        Optional[Path],
        typer.Option("--out", "-o", help="Output directory for generated JSON Schema files"),
    ] = None,
    base_id: Annotated[
        Optional[str],
        typer.Option("--base-id", "-b", help="Base URI for the $id property in generated schemas"),
    ] = None,
    entities: Annotated[
        Optional[List[str]],
        typer.Option(
            "--entities",
            "-e",
            help="Filter to specific entities (comma-separated logical names, repeatable)",
        ),
    ] = None,
    include_non_readable: bool = typer.Option(
        False, "--include-non-readable", help="Include attributes where ValidForReadApi = false"
    ),
    include_non_retrievable: bool = typer.Option(
        False, "--include-non-retrievable", help="Include attributes where IsRetrievable = false"
    ),
    generate_events: bool = typer.Option(
        False, "--generate-events", help="Generate EventBus envelope schemas for each entity"
    ),
    compact: bool = typer.Option(False, "--compact", help="Output compact JSON (no indentation)"),
) -> None:
    """Generate JSON Schema documents from a customizations.xml file."""
    config = get_config()
    entity_names = parse_entity_names(entities)

    options = config.to_options(
        input_path.resolve(),
        entity_filter=entity_names,
        output_path=output_path.resolve() if output_path else None,
        base_id=base_id,
        filter_valid_for_read_api=False if include_non_readable else None,
        filter_is_retrievable=False if include_non_retrievable else None,
        generate_event_envelopes=True if generate_events else None,
        pretty_print=False if compact else None,
    )

    console.print(f"Reading customizations from: {options.input_path}")
    if not input_path.is_file():
        typer.echo(f"Error: Input file not found: {options.input_path}", err=True)
        raise typer.Exit(1)

    service = SchemaGeneratorService(on_progress=lambda message: console.print(f"  {message}"))

    try:
        parsed = service.parse_entities(input_path)
        if not parsed:
            console.print("[yellow]No entities found in the customizations file.[/yellow]")
            return

        console.print(f"Found {len(parsed)} entities in customizations file.")

        if entity_names:
            parsed = service.filter_entities(parsed, entity_names)
            console.print(f"Filtered to {len(parsed)} entities based on --entities filter.")

        with cancel_on_interrupt() as cancel_event:
            result = service.generate(options, parsed, cancel_event)

    except (GenerationCancelledError, KeyboardInterrupt):
        console.print("[yellow]Operation cancelled.[/yellow]")
        raise typer.Exit(1)
    except FileError as e:
        logger.error(f"Error during schema generation: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    console.print()
    console.print(
        f"[green]Successfully generated {result.entity_schemas_generated} entity schemas "
        f"to: {options.output_path}[/green]"
    )
    if options.generate_event_envelopes:
        console.print(
            f"[green]Successfully generated {result.event_schemas_generated} event envelope "
            f"schemas to: {Path(options.output_path) / 'events'}[/green]"
        )


@app.command("entities")
def list_entities(
    input_path: Annotated[
        Path,
        typer.Option("--input", "-i", help="Path to the customizations.xml file"),
    ],
) -> None:
    """List the entities found in a customizations.xml file."""
    if not input_path.is_file():
        typer.echo(f"Error: Input file not found: {input_path}", err=True)
        raise typer.Exit(1)

    try:
        parsed = SchemaGeneratorService().parse_entities(input_path)
    except FileError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not parsed:
        console.print("[yellow]No entities found in the customizations file.[/yellow]")
        return

    table = Table(title=f"Entities in {input_path.name}")
    table.add_column("Logical Name", style="cyan")
    table.add_column("Display Name")
    table.add_column("Attributes", justify="right")

    for entity in parsed:
        table.add_row(entity.logical_name, entity.display_name or "", str(len(entity.attributes)))

    console.print(table)
