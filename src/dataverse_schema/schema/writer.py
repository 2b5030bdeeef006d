"""Serialises schema documents and writes them under the output directory."""

import json
from pathlib import Path
from typing import Any

from loguru import logger

from dataverse_schema.file_utils import write_file_atomic
from dataverse_schema.schema.models import Entity, GeneratorOptions

EVENTS_DIRECTORY = "events"


class SchemaWriter:
    """Writes JSON Schema documents using the naming rules of a generation run."""

    def __init__(self, options: GeneratorOptions):
        self.options = options
        self.output_path = Path(options.output_path)

    def serialize(self, document: dict[str, Any]) -> str:
        """Serialise a document, keeping key insertion order."""
        if self.options.pretty_print:
            return json.dumps(document, indent=2, ensure_ascii=False)
        return json.dumps(document, separators=(",", ":"), ensure_ascii=False)

    def _file_name(self, stem: str) -> str:
        if self.options.timestamp_suffix:
            return f"{stem}_{self.options.timestamp_suffix}.json"
        return f"{stem}.json"

    def entity_file_name(self, entity: Entity) -> str:
        """{logical_name}.json, or {logical_name}_{timestamp}.json in batch mode."""
        return self._file_name(entity.logical_name)

    def event_file_name(self, entity: Entity) -> str:
        """events/{logical_name}-event.json, timestamped likewise."""
        return f"{EVENTS_DIRECTORY}/{self._file_name(f'{entity.logical_name}-event')}"

    def write_schema(self, relative_name: str, document: dict[str, Any]) -> Path:
        """Write a document to output_path/relative_name atomically.

        Raises:
            FileWriteError: If the file cannot be written.
        """
        path = self.output_path / relative_name
        write_file_atomic(path, self.serialize(document))
        logger.debug(f"Wrote schema {path}")
        return path

    def write_entity_schema(self, entity: Entity, document: dict[str, Any]) -> Path:
        return self.write_schema(self.entity_file_name(entity), document)

    def write_event_schema(self, entity: Entity, document: dict[str, Any]) -> Path:
        return self.write_schema(self.event_file_name(entity), document)
