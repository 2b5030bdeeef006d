"""Builds JSON Schema documents from Dataverse entity metadata.

Two document kinds are produced:
  - entity schema: one Draft-7 object schema per entity, one property per
    visible attribute, required computed from the attribute required levels
  - event envelope: a fixed EventBus wrapper whose data payload references
    the entity schema by $id

Key insertion order is the emission order, so identical input always
serialises to identical bytes.
"""

from dataclasses import replace
from typing import Any, TypeAlias

from dataverse_schema.schema.models import (
    OPTION_SET_TYPES,
    Attribute,
    AttributeType,
    Entity,
    GeneratorOptions,
)
from dataverse_schema.schema.registry import OptionSetRegistry, default_registry
from dataverse_schema.schema.type_mapper import map_property

JSON_SCHEMA_DRAFT_7 = "http://json-schema.org/draft-07/schema#"

EVENT_TYPES = ["Create", "Update", "Delete"]
EVENT_REQUIRED_FIELDS = ["eventId", "eventType", "eventTime", "entityName", "data"]

# Attribute types that never appear in generated schemas
SKIPPED_TYPES = frozenset({AttributeType.VIRTUAL, AttributeType.MANAGED_PROPERTY})

SchemaDocument: TypeAlias = dict[str, Any]


class JsonSchemaBuilder:
    """Builds entity and event envelope schema documents for one set of options."""

    def __init__(self, options: GeneratorOptions, registry: OptionSetRegistry | None = None):
        self.options = options
        self.registry = registry if registry is not None else default_registry()

    def schema_id(self, relative_name: str) -> str:
        """Build a $id as {base_id}/{relative_name}.json."""
        base_id = self.options.base_id.rstrip("/")
        return f"{base_id}/{relative_name}.json"

    def entity_schema_id(self, entity: Entity) -> str:
        return self.schema_id(entity.logical_name)

    def event_schema_id(self, entity: Entity) -> str:
        return self.schema_id(f"events/{entity.logical_name}-event")

    # --- Attribute handling ---

    def filter_attributes(self, attributes: tuple[Attribute, ...] | list[Attribute]) -> list[Attribute]:
        """Drop virtual/managed attributes and those hidden from the read API.

        The result is re-sorted by logical name regardless of input order.
        """
        visible = [
            attribute
            for attribute in attributes
            if attribute.attribute_type not in SKIPPED_TYPES
            and (not self.options.filter_valid_for_read_api or attribute.valid_for_read_api)
            and (not self.options.filter_is_retrievable or attribute.is_retrievable)
        ]
        return sorted(visible, key=lambda a: a.logical_name)

    def resolve_options(self, attribute: Attribute) -> Attribute:
        """Fill option values from the registry for option-set attributes without inline values.

        Inline values always win. The caller's attribute is never mutated; a
        copy is returned when registry values are applied.
        """
        if attribute.attribute_type not in OPTION_SET_TYPES or attribute.option_values:
            return attribute

        values = self.registry.resolve(attribute.option_set_name, attribute.logical_name)
        if not values:
            return attribute

        description = attribute.description
        if not description and not attribute.display_name:
            description = self.registry.description(attribute.option_set_name, attribute.logical_name)

        return replace(attribute, option_values=values, description=description)

    # --- Documents ---

    def build_entity_schema(self, entity: Entity) -> SchemaDocument:
        """Build the JSON Schema document for an entity."""
        attributes = [self.resolve_options(a) for a in self.filter_attributes(entity.attributes)]

        properties: SchemaDocument = {}
        for attribute in attributes:
            properties[attribute.logical_name] = map_property(attribute)

        schema: SchemaDocument = {
            "$schema": JSON_SCHEMA_DRAFT_7,
            "$id": self.entity_schema_id(entity),
            "title": entity.display_name or entity.logical_name,
            "description": entity.description
            or f"Schema for Dataverse entity: {entity.logical_name}",
            "type": "object",
            "additionalProperties": False,
            "properties": properties,
        }

        required = sorted(a.logical_name for a in attributes if a.required_level.is_required)
        if required:
            schema["required"] = required

        return schema

    def build_event_envelope_schema(self, entity: Entity) -> SchemaDocument:
        """Build an EventBus envelope schema whose payload references the entity schema."""
        entity_ref = self.entity_schema_id(entity)

        properties: SchemaDocument = {
            "eventId": {
                "type": "string",
                "format": "uuid",
                "description": "Unique identifier for this event",
            },
            "eventType": {
                "type": "string",
                "enum": list(EVENT_TYPES),
                "description": "Type of entity operation",
            },
            "eventTime": {
                "type": "string",
                "format": "date-time",
                "description": "Timestamp when the event occurred",
            },
            "entityName": {
                "type": "string",
                "const": entity.logical_name,
                "description": "Logical name of the entity",
            },
            "correlationId": {
                "type": "string",
                "format": "uuid",
                "description": "Correlation ID for tracking related events",
            },
            "userId": {
                "type": "string",
                "format": "uuid",
                "description": "ID of the user who triggered the event",
            },
            "organizationId": {
                "type": "string",
                "format": "uuid",
                "description": "ID of the Dataverse organization",
            },
            "data": {
                "$ref": entity_ref,
                "description": "The entity data payload",
            },
            "previousData": {
                "oneOf": [
                    {"$ref": entity_ref},
                    {"type": "null"},
                ],
                "description": "Previous state of the entity (for Update events)",
            },
        }

        return {
            "$schema": JSON_SCHEMA_DRAFT_7,
            "$id": self.event_schema_id(entity),
            "title": f"{entity.display_name or entity.logical_name} Event",
            "description": f"EventBus envelope for {entity.logical_name} entity events",
            "type": "object",
            "additionalProperties": False,
            "properties": properties,
            # Fixed contract order, not sorted
            "required": list(EVENT_REQUIRED_FIELDS),
        }
