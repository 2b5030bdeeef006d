"""Services that orchestrate parsing, building and writing schemas."""

from dataverse_schema.services.batch import BatchFileResult, BatchProcessor, BatchResult
from dataverse_schema.services.exceptions import GenerationCancelledError, GenerationError
from dataverse_schema.services.generator import GenerationResult, SchemaGeneratorService

__all__ = [
    "BatchFileResult",
    "BatchProcessor",
    "BatchResult",
    "GenerationCancelledError",
    "GenerationError",
    "GenerationResult",
    "SchemaGeneratorService",
]
