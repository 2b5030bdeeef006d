"""Command module exports for dataverse-schema-generator."""

from . import batch, generate

__all__ = ["batch", "generate"]
