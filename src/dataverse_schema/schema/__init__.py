"""Schema generation core for Dataverse customizations.

Parses customizations.xml into entity metadata and turns each entity into a
Draft-7 JSON Schema document, optionally with an EventBus envelope schema.
"""

from dataverse_schema.schema.models import (
    Attribute,
    AttributeType,
    Entity,
    GeneratorOptions,
    OptionValue,
    RequiredLevel,
)
from dataverse_schema.schema.registry import (
    OptionSetDefinition,
    OptionSetRegistry,
    builtin_option_sets,
    default_registry,
)
from dataverse_schema.schema.parser import parse_customizations
from dataverse_schema.schema.type_mapper import map_property
from dataverse_schema.schema.builder import JsonSchemaBuilder
from dataverse_schema.schema.writer import SchemaWriter

__all__ = [
    # Models
    "Attribute",
    "AttributeType",
    "Entity",
    "GeneratorOptions",
    "OptionValue",
    "RequiredLevel",
    # Registry
    "OptionSetDefinition",
    "OptionSetRegistry",
    "builtin_option_sets",
    "default_registry",
    # Parser
    "parse_customizations",
    # Type mapping
    "map_property",
    # Builder
    "JsonSchemaBuilder",
    # Writer
    "SchemaWriter",
]
