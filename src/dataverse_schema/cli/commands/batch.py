"""Command module for batch processing of the Input folder."""

from pathlib import Path
from typing import Annotated, List, Optional

import typer
from rich.table import Table

from dataverse_schema.cli.app import app
from dataverse_schema.cli.commands.command_utils import (
    cancel_on_interrupt,
    console,
    parse_entity_names,
)
from dataverse_schema.config import get_config
from dataverse_schema.services import BatchProcessor


@app.command()
def batch(
    base_path: Annotated[
        Optional[Path],
        typer.Option(
            "--base-path",
            help="Folder containing the Input directory (defaults to the current directory)",
        ),
    ] = None,
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
        typer.Option("--entities", "-e", help="Filter to specific entities (comma-separated)"),
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
    """Process every XML file in the Input folder and archive it.

    Successful files move to Input/Archive/{timestamp}/, failed files to
    Input/BadXml/{timestamp}/. Exits with code 1 if any file failed.
    """
    config = get_config()
    processor = BatchProcessor(
        base_path=base_path,
        on_progress=lambda message: console.print(message),
    )

    with cancel_on_interrupt() as cancel_event:
        result = processor.process_batch(
            output_path=output_path or config.output_path,
            base_id=base_id or config.base_id,
            filter_valid_for_read_api=not include_non_readable and config.filter_valid_for_read_api,
            filter_is_retrievable=not include_non_retrievable and config.filter_is_retrievable,
            entity_filter=parse_entity_names(entities),
            generate_event_envelopes=generate_events or config.generate_event_envelopes,
            pretty_print=not compact and config.pretty_print,
            cancel_event=cancel_event,
        )

    if not result.processed_files:
        return

    table = Table(title="Batch Results")
    table.add_column("File", style="cyan")
    table.add_column("Status", justify="center")
    table.add_column("Entity Schemas", justify="right")
    table.add_column("Event Schemas", justify="right")
    table.add_column("Details")

    for file_result in result.processed_files:
        status = "[green]ok[/green]" if file_result.success else "[red]failed[/red]"
        details = (
            str(file_result.archive_path)
            if file_result.success
            else (file_result.error_message or "")
        )
        table.add_row(
            file_result.source_file.name,
            status,
            str(file_result.entity_schemas_generated),
            str(file_result.event_schemas_generated),
            details,
        )

    console.print(table)
    console.print(
        f"\nSummary: {result.total_files_processed} processed, "
        f"{result.total_files_failed} failed, "
        f"{result.total_entity_schemas} entity schemas, "
        f"{result.total_event_schemas} event schemas"
    )

    if result.total_files_failed > 0:
        raise typer.Exit(1)
