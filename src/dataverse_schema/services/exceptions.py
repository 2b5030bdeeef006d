class GenerationError(Exception):
    """Base exception for schema generation failures."""


class GenerationCancelledError(GenerationError):
    """Raised when a generation run is cancelled between entities."""
