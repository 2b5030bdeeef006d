"""Service that orchestrates the schema generation process."""

import threading
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TypeAlias, Union

from loguru import logger

from dataverse_schema.file_utils import FileWriteError
from dataverse_schema.schema.builder import JsonSchemaBuilder
from dataverse_schema.schema.models import Entity, GeneratorOptions
from dataverse_schema.schema.parser import parse_customizations
from dataverse_schema.schema.registry import OptionSetRegistry
from dataverse_schema.schema.writer import SchemaWriter
from dataverse_schema.services.exceptions import GenerationCancelledError

ProgressCallback: TypeAlias = Callable[[str], None]


@dataclass
class GenerationResult:
    """Counts of documents written by a generation run."""

    entity_schemas_generated: int = 0
    event_schemas_generated: int = 0


class SchemaGeneratorService:
    """Parses customizations and generates schema documents for a set of entities.

    Progress messages are sent to the optional on_progress callable (one per
    entity, one more per event envelope) and logged.
    """

    def __init__(
        self,
        registry: Optional[OptionSetRegistry] = None,
        on_progress: Optional[ProgressCallback] = None,
    ):
        self.registry = registry
        self.on_progress = on_progress

    def _report(self, message: str) -> None:
        logger.info(message)
        if self.on_progress is not None:
            self.on_progress(message)

    def parse_entities(self, path: Union[str, Path]) -> list[Entity]:
        """Parse entities from a customizations.xml file.

        Raises:
            DocumentReadError: If the file is missing or malformed.
        """
        entities = parse_customizations(path)
        logger.info(f"Found {len(entities)} entities in {path}")
        return entities

    def filter_entities(self, entities: Sequence[Entity], names: Iterable[str]) -> list[Entity]:
        """Keep entities whose logical name is in names (case-insensitive).

        An empty names collection keeps every entity.
        """
        wanted = {name.strip().lower() for name in names if name.strip()}
        if not wanted:
            return list(entities)
        return [entity for entity in entities if entity.logical_name in wanted]

    def generate(
        self,
        options: GeneratorOptions,
        entities: Sequence[Entity],
        cancel_event: Optional[threading.Event] = None,
    ) -> GenerationResult:
        """Build and write schema documents for each entity.

        Both documents of an entity are built before either is written, and
        every write is atomic, so an entity is either fully written or not
        at all.

        Raises:
            GenerationCancelledError: If cancel_event is set between entities.
            FileWriteError: If a document cannot be written.
        """
        result = GenerationResult()
        builder = JsonSchemaBuilder(options, self.registry)
        writer = SchemaWriter(options)

        for entity in entities:
            if cancel_event is not None and cancel_event.is_set():
                logger.warning(
                    f"Generation cancelled after {result.entity_schemas_generated} entities"
                )
                raise GenerationCancelledError("Schema generation was cancelled")

            entity_schema = builder.build_entity_schema(entity)
            event_schema = (
                builder.build_event_envelope_schema(entity)
                if options.generate_event_envelopes
                else None
            )

            entity_path = writer.write_entity_schema(entity, entity_schema)

            # --- Event write failure ---
            # Trigger: the entity document is on disk but its envelope cannot be written
            # Outcome: the entity document is removed so no half-written entity remains
            if event_schema is not None:
                try:
                    writer.write_event_schema(entity, event_schema)
                except FileWriteError:
                    logger.error(f"Removing {entity_path} after event schema write failed")
                    entity_path.unlink(missing_ok=True)
                    raise

            result.entity_schemas_generated += 1
            self._report(
                f"Generated: {writer.entity_file_name(entity)} "
                f"({len(entity.attributes)} attributes)"
            )
            if event_schema is not None:
                result.event_schemas_generated += 1
                self._report(f"Generated: {writer.event_file_name(entity)}")

        return result
