"""Batch processing of customizations files dropped into an Input folder.

Layout under the base path:
  Input/                       *.xml files waiting to be processed
  Input/Archive/{timestamp}/   files that generated successfully
  Input/BadXml/{timestamp}/    files that failed or contained no entities

Each file gets its own timestamp, which is also used as the output file name
suffix so repeated runs never overwrite earlier schemas.
"""

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from loguru import logger

from dataverse_schema.file_utils import ensure_directory, move_file
from dataverse_schema.schema.models import GeneratorOptions
from dataverse_schema.services.exceptions import GenerationCancelledError
from dataverse_schema.services.generator import ProgressCallback, SchemaGeneratorService

INPUT_FOLDER_NAME = "Input"
ARCHIVE_FOLDER_NAME = "Archive"
BAD_XML_FOLDER_NAME = "BadXml"
TIMESTAMP_FORMAT = "%d%m%y_%H%M%S"  # ddMMyy_HHmmss


@dataclass
class BatchFileResult:
    """Result of processing a single input file."""

    source_file: Path
    timestamp: str
    success: bool = False
    error_message: Optional[str] = None
    entity_schemas_generated: int = 0
    event_schemas_generated: int = 0
    archive_path: Optional[Path] = None
    bad_xml_path: Optional[Path] = None


@dataclass
class BatchResult:
    """Result of a whole batch run."""

    processed_files: list[BatchFileResult] = field(default_factory=list)

    @property
    def total_files_processed(self) -> int:
        return sum(1 for f in self.processed_files if f.success)

    @property
    def total_files_failed(self) -> int:
        return sum(1 for f in self.processed_files if not f.success)

    @property
    def total_entity_schemas(self) -> int:
        return sum(f.entity_schemas_generated for f in self.processed_files)

    @property
    def total_event_schemas(self) -> int:
        return sum(f.event_schemas_generated for f in self.processed_files)


def generate_timestamp(dt: Optional[datetime] = None) -> str:
    """Format a timestamp as ddMMyy_HHmmss."""
    return (dt or datetime.now()).strftime(TIMESTAMP_FORMAT)


class BatchProcessor:
    """Processes every XML file in the Input folder, archiving each one afterwards."""

    def __init__(
        self,
        base_path: Union[str, Path, None] = None,
        service: Optional[SchemaGeneratorService] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.base_path = Path(base_path) if base_path is not None else Path.cwd()
        self.on_progress = on_progress
        self.service = service or SchemaGeneratorService(on_progress=on_progress)

    @property
    def input_folder(self) -> Path:
        return self.base_path / INPUT_FOLDER_NAME

    def ensure_input_folder(self) -> bool:
        """Create the Input folder if needed. Returns True if it was created."""
        if self.input_folder.is_dir():
            return False
        ensure_directory(self.input_folder)
        return True

    def input_files(self) -> list[Path]:
        """Top-level *.xml files in the Input folder, sorted by path."""
        self.ensure_input_folder()
        return sorted(p for p in self.input_folder.glob("*.xml") if p.is_file())

    def _report(self, message: str) -> None:
        logger.info(message)
        if self.on_progress is not None:
            self.on_progress(message)

    def process_batch(
        self,
        output_path: Union[str, Path],
        base_id: str,
        filter_valid_for_read_api: bool = True,
        filter_is_retrievable: bool = True,
        entity_filter: Iterable[str] = (),
        generate_event_envelopes: bool = False,
        pretty_print: bool = True,
        cancel_event: Optional[threading.Event] = None,
    ) -> BatchResult:
        """Process all XML files in the Input folder.

        Failures are recorded per file and the batch moves on to the next one.
        Cancellation is checked before each file.
        """
        result = BatchResult()
        files = self.input_files()

        if not files:
            self._report("No XML files found in Input folder.")
            return result

        self._report(f"Found {len(files)} XML file(s) to process.")

        options = GeneratorOptions(
            input_path="",
            output_path=str(output_path),
            base_id=base_id,
            filter_valid_for_read_api=filter_valid_for_read_api,
            filter_is_retrievable=filter_is_retrievable,
            entity_filter=frozenset(entity_filter),
            generate_event_envelopes=generate_event_envelopes,
            pretty_print=pretty_print,
        )

        for input_file in files:
            if cancel_event is not None and cancel_event.is_set():
                self._report("Batch processing cancelled.")
                break

            result.processed_files.append(self.process_file(input_file, options, cancel_event))

        return result

    def process_file(
        self,
        input_file: Path,
        options: GeneratorOptions,
        cancel_event: Optional[threading.Event] = None,
    ) -> BatchFileResult:
        """Process a single file with a fresh timestamp suffix, then archive it."""
        timestamp = generate_timestamp()
        file_result = BatchFileResult(source_file=input_file, timestamp=timestamp)
        self._report(f"Processing: {input_file.name} (timestamp: {timestamp})")

        try:
            options = replace(options, input_path=str(input_file), timestamp_suffix=timestamp)
            entities = self.service.parse_entities(input_file)

            # --- Empty document ---
            # Trigger: the file parsed but has no Entities container or entities
            # Outcome: treated as a bad file and moved aside
            if not entities:
                self._report(f"  No entities found in {input_file.name}.")
                file_result.error_message = "No entities found in file"
                file_result.bad_xml_path = self._move_to_bad_xml(input_file, timestamp)
                return file_result

            self._report(f"  Found {len(entities)} entities.")

            if options.entity_filter:
                entities = self.service.filter_entities(entities, options.entity_filter)
                self._report(f"  Filtered to {len(entities)} entities.")

            generation = self.service.generate(options, entities, cancel_event)
            file_result.entity_schemas_generated = generation.entity_schemas_generated
            file_result.event_schemas_generated = generation.event_schemas_generated

            file_result.archive_path = move_file(
                input_file, self.input_folder / ARCHIVE_FOLDER_NAME / timestamp
            )
            file_result.success = True

            self._report(f"  Generated {generation.entity_schemas_generated} entity schemas.")
            if options.generate_event_envelopes:
                self._report(f"  Generated {generation.event_schemas_generated} event schemas.")
            self._report(f"  Archived to: {file_result.archive_path}")

        except GenerationCancelledError:
            # Left in Input so the next run picks it up again
            self._report(f"  Cancelled while processing {input_file.name}.")
            file_result.error_message = "Cancelled"
            return file_result

        except Exception as e:
            logger.exception(f"Error processing {input_file.name}")
            self._report(f"  Error processing {input_file.name}: {e}")
            file_result.success = False
            file_result.error_message = str(e)
            try:
                file_result.bad_xml_path = self._move_to_bad_xml(input_file, timestamp)
            except OSError as move_error:
                self._report(f"  Failed to move file to BadXml: {move_error}")

        return file_result

    def _move_to_bad_xml(self, input_file: Path, timestamp: str) -> Path:
        destination = move_file(input_file, self.input_folder / BAD_XML_FOLDER_NAME / timestamp)
        self._report(f"  Moved to: {destination}")
        return destination
