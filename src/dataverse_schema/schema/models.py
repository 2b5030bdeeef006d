"""Metadata model for Dataverse schema generation.

Plain records produced by the customizations parser and consumed by the schema
builder. Records are frozen once created; list-valued fields are tuples so an
entity handed to the builder can never change underneath it.
"""

from dataclasses import dataclass, field
from enum import Enum


class AttributeType(str, Enum):
    """Closed set of Dataverse attribute types.

    Source type strings that are not recognised map to UNKNOWN rather than
    being dropped, so every attribute carries an explicit variant.
    """

    UNKNOWN = "Unknown"
    UNIQUEIDENTIFIER = "Uniqueidentifier"
    STRING = "String"
    NVARCHAR = "Nvarchar"
    NTEXT = "Ntext"
    MEMO = "Memo"
    DATETIME = "DateTime"
    INTEGER = "Integer"
    BIGINT = "BigInt"
    DECIMAL = "Decimal"
    DOUBLE = "Double"
    MONEY = "Money"
    BOOLEAN = "Boolean"
    PICKLIST = "Picklist"
    STATE = "State"
    STATUS = "Status"
    LOOKUP = "Lookup"
    OWNER = "Owner"
    CUSTOMER = "Customer"
    ENTITY_NAME = "EntityName"
    VIRTUAL = "Virtual"
    MANAGED_PROPERTY = "ManagedProperty"
    MULTI_SELECT_PICKLIST = "MultiSelectPicklist"
    IMAGE = "Image"
    FILE = "File"


# Attribute types whose values come from an option set
OPTION_SET_TYPES = frozenset(
    {
        AttributeType.PICKLIST,
        AttributeType.STATE,
        AttributeType.STATUS,
        AttributeType.MULTI_SELECT_PICKLIST,
    }
)


class RequiredLevel(str, Enum):
    """Dataverse required level for attributes."""

    NONE = "None"
    RECOMMENDED = "Recommended"
    REQUIRED = "Required"
    SYSTEM_REQUIRED = "SystemRequired"

    @property
    def is_required(self) -> bool:
        return self in (RequiredLevel.REQUIRED, RequiredLevel.SYSTEM_REQUIRED)


@dataclass(frozen=True)
class OptionValue:
    """A single value of an option set (picklist)."""

    value: int  # Stored discriminant
    label: str  # Never empty, falls back to Option_<value>
    description: str | None = None


@dataclass(frozen=True)
class Attribute:
    """A Dataverse attribute (column)."""

    logical_name: str
    physical_name: str
    attribute_type: AttributeType = AttributeType.UNKNOWN
    attribute_type_name: str | None = None  # Raw type string from the source
    display_name: str | None = None
    description: str | None = None

    # String constraints
    max_length: int | None = None

    # Numeric constraints
    min_value: int | None = None
    max_value: int | None = None
    precision: int | None = None  # Digits after the decimal point

    required_level: RequiredLevel = RequiredLevel.NONE

    # API visibility flags, all default to True when absent from the source
    valid_for_read_api: bool = True
    is_retrievable: bool = True
    is_valid_for_create: bool = True
    is_valid_for_update: bool = True

    # Option sets
    option_values: tuple[OptionValue, ...] | None = None
    option_set_name: str | None = None

    # Lookups
    lookup_targets: tuple[str, ...] | None = None


@dataclass(frozen=True)
class Entity:
    """A Dataverse entity with its attributes, ordered by logical name."""

    name: str
    logical_name: str
    display_name: str | None = None
    description: str | None = None
    primary_id_attribute: str | None = None
    primary_name_attribute: str | None = None
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True)
class GeneratorOptions:
    """Options for a single generation run."""

    input_path: str
    output_path: str
    base_id: str
    filter_valid_for_read_api: bool = True  # Drop attributes with ValidForReadApi = false
    filter_is_retrievable: bool = True  # Drop attributes with IsRetrievable = false
    entity_filter: frozenset[str] = field(default_factory=frozenset)  # Empty = all entities
    generate_event_envelopes: bool = False
    pretty_print: bool = True
    timestamp_suffix: str | None = None  # ddMMyy_HHmmss, batch mode only
