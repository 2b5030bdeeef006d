"""Maps Dataverse attributes to JSON Schema property fragments.

  Attribute type                  -> Fragment
  -------------------------------------------------------------------
  Uniqueidentifier                -> string, format uuid
  String / Nvarchar / Ntext / Memo -> string, maxLength when > 0
  DateTime                        -> string, format date-time
  Integer                         -> integer, minimum / maximum when present
  BigInt                          -> integer, format int64
  Decimal / Double / Money        -> number, multipleOf 10^-precision when precision > 0
  Boolean                         -> boolean
  Picklist / State / Status       -> oneOf [{const, title}], integer without options
  MultiSelectPicklist             -> array of the picklist fragment, uniqueItems
  Lookup / Owner / Customer       -> string, format uuid, x-lookup-target(s)
  EntityName                      -> string, logical name pattern
  Image / File                    -> string, contentEncoding base64
  anything else                   -> string

The mapper is pure: it never consults the option set registry. Attributes
that get their options from a global option set arrive here with
option_values already filled in by the schema builder.
"""

from collections.abc import Callable
from typing import Any, TypeAlias

from dataverse_schema.schema.models import Attribute, AttributeType, OptionValue

ENTITY_NAME_PATTERN = "^[a-z_][a-z0-9_]*$"

Fragment: TypeAlias = dict[str, Any]


def _option_list(options: tuple[OptionValue, ...]) -> list[Fragment]:
    one_of = []
    for option in options:
        option_def: Fragment = {"const": option.value, "title": option.label}
        if option.description:
            option_def["description"] = option.description
        one_of.append(option_def)
    return one_of


def _picklist_fragment(attribute: Attribute) -> Fragment:
    if attribute.option_values:
        return {"oneOf": _option_list(attribute.option_values)}
    # No options known, fall back to the raw stored value
    return {"type": "integer"}


# --- Per-type mappers ---


def _map_uniqueidentifier(attribute: Attribute) -> Fragment:
    return {"type": "string", "format": "uuid"}


def _map_string(attribute: Attribute) -> Fragment:
    fragment: Fragment = {"type": "string"}
    if attribute.max_length is not None and attribute.max_length > 0:
        fragment["maxLength"] = attribute.max_length
    return fragment


def _map_datetime(attribute: Attribute) -> Fragment:
    return {"type": "string", "format": "date-time"}


def _map_integer(attribute: Attribute) -> Fragment:
    fragment: Fragment = {"type": "integer"}
    if attribute.min_value is not None:
        fragment["minimum"] = attribute.min_value
    if attribute.max_value is not None:
        fragment["maximum"] = attribute.max_value
    return fragment


def _map_bigint(attribute: Attribute) -> Fragment:
    return {"type": "integer", "format": "int64"}


def _map_number(attribute: Attribute) -> Fragment:
    fragment: Fragment = {"type": "number"}
    if attribute.precision is not None and attribute.precision > 0:
        # precision 2 -> 0.01
        fragment["multipleOf"] = 10.0 ** -attribute.precision
    return fragment


def _map_boolean(attribute: Attribute) -> Fragment:
    return {"type": "boolean"}


def _map_picklist(attribute: Attribute) -> Fragment:
    return _picklist_fragment(attribute)


def _map_multi_select_picklist(attribute: Attribute) -> Fragment:
    return {
        "type": "array",
        "items": _picklist_fragment(attribute),
        "uniqueItems": True,
    }


def _map_lookup(attribute: Attribute) -> Fragment:
    fragment: Fragment = {"type": "string", "format": "uuid"}
    targets = attribute.lookup_targets or ()
    if len(targets) == 1:
        fragment["x-lookup-target"] = targets[0]
    elif len(targets) > 1:
        fragment["x-lookup-targets"] = list(targets)
    return fragment


def _map_entity_name(attribute: Attribute) -> Fragment:
    return {"type": "string", "pattern": ENTITY_NAME_PATTERN}


def _map_binary(attribute: Attribute) -> Fragment:
    return {"type": "string", "contentEncoding": "base64"}


def _map_plain_string(attribute: Attribute) -> Fragment:
    return {"type": "string"}


# Every AttributeType has an entry; tests assert the table stays exhaustive
TYPE_MAPPERS: dict[AttributeType, Callable[[Attribute], Fragment]] = {
    AttributeType.UNIQUEIDENTIFIER: _map_uniqueidentifier,
    AttributeType.STRING: _map_string,
    AttributeType.NVARCHAR: _map_string,
    AttributeType.NTEXT: _map_string,
    AttributeType.MEMO: _map_string,
    AttributeType.DATETIME: _map_datetime,
    AttributeType.INTEGER: _map_integer,
    AttributeType.BIGINT: _map_bigint,
    AttributeType.DECIMAL: _map_number,
    AttributeType.DOUBLE: _map_number,
    AttributeType.MONEY: _map_number,
    AttributeType.BOOLEAN: _map_boolean,
    AttributeType.PICKLIST: _map_picklist,
    AttributeType.STATE: _map_picklist,
    AttributeType.STATUS: _map_picklist,
    AttributeType.MULTI_SELECT_PICKLIST: _map_multi_select_picklist,
    AttributeType.LOOKUP: _map_lookup,
    AttributeType.OWNER: _map_lookup,
    AttributeType.CUSTOMER: _map_lookup,
    AttributeType.ENTITY_NAME: _map_entity_name,
    AttributeType.IMAGE: _map_binary,
    AttributeType.FILE: _map_binary,
    AttributeType.VIRTUAL: _map_plain_string,
    AttributeType.MANAGED_PROPERTY: _map_plain_string,
    AttributeType.UNKNOWN: _map_plain_string,
}


def map_property(attribute: Attribute) -> Fragment:
    """Convert an attribute into a JSON Schema property definition.

    The description comes from the attribute description, falling back to the
    display name, and is omitted when neither is set.
    """
    property_schema: Fragment = {}

    description = attribute.description or attribute.display_name
    if description:
        property_schema["description"] = description

    mapper = TYPE_MAPPERS.get(attribute.attribute_type, _map_plain_string)
    property_schema.update(mapper(attribute))
    return property_schema
