"""Parser for Dataverse customizations.xml files.

Walks a solution export and extracts entity and attribute metadata into the
frozen records of dataverse_schema.schema.models.

Document shape (only the parts that are read):
  ImportExportXml
    Entities
      Entity
        Name                                   -> entity name (required)
        EntityInfo/entity[@primaryidattribute, @primaryattribute]
          LocalizedNames/LocalizedName         -> display name
          Descriptions/Description             -> description
          attributes/attribute[@PhysicalName]  -> attributes (PhysicalName required)

Malformed values never fail the parse: unparseable numbers become None,
missing labels become None (or a placeholder for option labels), and entities
or attributes without a name are skipped. Entities and attributes are sorted by
logical name so downstream output is reproducible.
"""

import re
from pathlib import Path
from typing import Union

from loguru import logger
from lxml import etree

from dataverse_schema.file_utils import DocumentReadError
from dataverse_schema.schema.models import (
    Attribute,
    AttributeType,
    Entity,
    OptionValue,
    RequiredLevel,
)

ENGLISH_LANGUAGE_CODE = "1033"
INTEGER_PATTERN = re.compile(r"\s*[+-]?[0-9]+\s*")

# Source type string (lower-cased) -> attribute type
ATTRIBUTE_TYPE_NAMES: dict[str, AttributeType] = {
    "primarykey": AttributeType.UNIQUEIDENTIFIER,
    "uniqueidentifier": AttributeType.UNIQUEIDENTIFIER,
    "nvarchar": AttributeType.NVARCHAR,
    "string": AttributeType.NVARCHAR,
    "ntext": AttributeType.NTEXT,
    "memo": AttributeType.MEMO,
    "datetime": AttributeType.DATETIME,
    "int": AttributeType.INTEGER,
    "integer": AttributeType.INTEGER,
    "bigint": AttributeType.BIGINT,
    "decimal": AttributeType.DECIMAL,
    "float": AttributeType.DOUBLE,
    "double": AttributeType.DOUBLE,
    "money": AttributeType.MONEY,
    "bit": AttributeType.BOOLEAN,
    "boolean": AttributeType.BOOLEAN,
    "picklist": AttributeType.PICKLIST,
    "state": AttributeType.STATE,
    "status": AttributeType.STATUS,
    "lookup": AttributeType.LOOKUP,
    "owner": AttributeType.OWNER,
    "customer": AttributeType.CUSTOMER,
    "entityname": AttributeType.ENTITY_NAME,
    "virtual": AttributeType.VIRTUAL,
    "managedproperty": AttributeType.MANAGED_PROPERTY,
    "multiselectpicklist": AttributeType.MULTI_SELECT_PICKLIST,
    "image": AttributeType.IMAGE,
    "file": AttributeType.FILE,
}

REQUIRED_LEVEL_NAMES: dict[str, RequiredLevel] = {
    "none": RequiredLevel.NONE,
    "applicationrequired": RequiredLevel.NONE,
    "recommended": RequiredLevel.RECOMMENDED,
    "required": RequiredLevel.REQUIRED,
    "systemrequired": RequiredLevel.SYSTEM_REQUIRED,
}


# --- Field helpers ---


def parse_attribute_type(type_name: str | None) -> AttributeType:
    """Map a source type string to an AttributeType, UNKNOWN if unrecognised."""
    if not type_name:
        return AttributeType.UNKNOWN
    return ATTRIBUTE_TYPE_NAMES.get(type_name.strip().lower(), AttributeType.UNKNOWN)


def parse_required_level(level: str | None) -> RequiredLevel:
    if not level:
        return RequiredLevel.NONE
    return REQUIRED_LEVEL_NAMES.get(level.strip().lower(), RequiredLevel.NONE)


def parse_int(value: str | None) -> int | None:
    """Best-effort integer parse; None for missing or malformed values.

    Only an optional sign and ASCII digits are accepted, so forms such as
    "1_000" or non-ASCII digits are treated as malformed.
    """
    if not value or not INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


def _child_text(element: etree._Element, tag: str) -> str | None:
    child = element.find(tag)
    if child is None:
        return None
    return child.text or ""


def _int_element(element: etree._Element, tag: str) -> int | None:
    return parse_int(_child_text(element, tag))


def _bool_flag(element: etree._Element, name: str, default: bool) -> bool:
    """Read a boolean flag from a child element, falling back to a node attribute.

    "1" and "true" (any case) are True, any other present value is False and a
    missing or empty value gives the default.
    """
    value = _child_text(element, name)
    if value is None:
        value = element.get(name)
    if not value:
        return default
    value = value.strip()
    return value == "1" or value.lower() == "true"


def localized_label(labels: etree._Element | None) -> str | None:
    """Pick the English (1033) label from a label container.

    Falls back to the first entry in document order when no English entry
    exists. Returns the entry's description attribute, or None when the
    container is missing or empty.
    """
    if labels is None:
        return None

    # Elements only, comments and processing instructions are skipped
    entries = list(labels.iterchildren(tag=etree.Element))
    if not entries:
        return None

    for entry in entries:
        if entry.get("languagecode") == ENGLISH_LANGUAGE_CODE:
            return entry.get("description")

    return entries[0].get("description")


def _option_values(attribute_element: etree._Element) -> tuple[OptionValue, ...] | None:
    option_set = attribute_element.find("optionset")
    if option_set is None:
        return None

    options: list[OptionValue] = []
    for option in option_set.iterchildren("option"):
        value = parse_int(option.get("value"))
        if value is None:
            continue

        label = localized_label(option.find("labels")) or f"Option_{value}"
        description = localized_label(option.find("Descriptions"))
        options.append(OptionValue(value=value, label=label, description=description))

    if not options:
        return None
    return tuple(sorted(options, key=lambda o: o.value))


def _lookup_targets(attribute_element: etree._Element) -> tuple[str, ...] | None:
    lookup_types = attribute_element.find("LookupTypes")
    if lookup_types is None:
        return None

    targets = []
    for lookup_type in lookup_types.iterchildren("LookupType"):
        target = lookup_type.get("id") or (lookup_type.text or "").strip()
        if target:
            targets.append(target)

    return tuple(targets) if targets else None


# --- Element parsers ---


def _parse_attribute(attribute_element: etree._Element) -> Attribute | None:
    physical_name = attribute_element.get("PhysicalName")
    if not physical_name:
        return None

    attribute_type_name = _child_text(attribute_element, "Type")
    option_set = attribute_element.find("optionset")

    max_length = _int_element(attribute_element, "Length")
    if max_length is None:
        max_length = _int_element(attribute_element, "MaxLength")

    return Attribute(
        logical_name=physical_name.lower(),
        physical_name=physical_name,
        attribute_type=parse_attribute_type(attribute_type_name),
        attribute_type_name=attribute_type_name,
        # No fallback to PhysicalName: unlabeled attributes get no description
        display_name=localized_label(attribute_element.find("displaynames")),
        description=localized_label(attribute_element.find("Descriptions")),
        max_length=max_length,
        min_value=_int_element(attribute_element, "MinValue"),
        max_value=_int_element(attribute_element, "MaxValue"),
        precision=_int_element(attribute_element, "Precision"),
        required_level=parse_required_level(_child_text(attribute_element, "RequiredLevel")),
        valid_for_read_api=_bool_flag(attribute_element, "ValidForReadApi", True),
        is_retrievable=_bool_flag(attribute_element, "IsRetrievable", True),
        is_valid_for_create=_bool_flag(attribute_element, "ValidForCreateApi", True),
        is_valid_for_update=_bool_flag(attribute_element, "ValidForUpdateApi", True),
        option_values=_option_values(attribute_element),
        option_set_name=option_set.get("Name") if option_set is not None else None,
        lookup_targets=_lookup_targets(attribute_element),
    )


def _parse_attributes(entity_info: etree._Element | None, entity_name: str) -> tuple[Attribute, ...]:
    if entity_info is None:
        return ()
    attributes_element = entity_info.find("attributes")
    if attributes_element is None:
        return ()

    by_logical_name: dict[str, Attribute] = {}
    for attribute_element in attributes_element.iterchildren("attribute"):
        attribute = _parse_attribute(attribute_element)
        if attribute is None:
            logger.debug(f"Skipping attribute without PhysicalName in entity {entity_name}")
            continue

        # --- Duplicate logical names ---
        # Trigger: two attributes differ only by case in PhysicalName
        # Outcome: first one wins, logical names stay unique within the entity
        if attribute.logical_name in by_logical_name:
            logger.warning(
                f"Duplicate attribute {attribute.logical_name} in entity {entity_name}, "
                "keeping the first definition"
            )
            continue
        by_logical_name[attribute.logical_name] = attribute

    return tuple(by_logical_name[name] for name in sorted(by_logical_name))


def _parse_entity(entity_element: etree._Element) -> Entity | None:
    name = _child_text(entity_element, "Name")
    if name is None or not name.strip():
        return None
    name = name.strip()

    entity_info = entity_element.find("EntityInfo/entity")
    labels = entity_info.find("LocalizedNames") if entity_info is not None else None
    descriptions = entity_info.find("Descriptions") if entity_info is not None else None

    return Entity(
        name=name,
        logical_name=name.lower(),
        # None when unlabeled, the builder falls back to the logical name for the title
        display_name=localized_label(labels),
        description=localized_label(descriptions),
        primary_id_attribute=entity_info.get("primaryidattribute") if entity_info is not None else None,
        primary_name_attribute=entity_info.get("primaryattribute") if entity_info is not None else None,
        attributes=_parse_attributes(entity_info, name),
    )


# --- Main Parser ---


def load_document(path: Union[str, Path]) -> etree._ElementTree:
    """Load an XML document, raising DocumentReadError on any read or syntax failure."""
    parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=True)
    try:
        return etree.parse(str(path), parser)
    except etree.XMLSyntaxError as e:
        raise DocumentReadError(f"Malformed XML in {path}: {e}") from e
    except OSError as e:
        raise DocumentReadError(f"Cannot read {path}: {e}") from e


def parse_customizations(path: Union[str, Path]) -> list[Entity]:
    """Parse a customizations.xml file into entities ordered by logical name.

    Args:
        path: Path to the customizations.xml file.

    Returns:
        Entities sorted by logical name, each with attributes sorted by logical
        name. Empty when the document has no Entities container.

    Raises:
        DocumentReadError: If the file cannot be opened or is not well-formed.
    """
    document = load_document(path)

    entities_element = document.getroot().find("Entities")
    if entities_element is None:
        logger.info(f"No Entities element found in {path}")
        return []

    entities: list[Entity] = []
    for entity_element in entities_element.iterchildren("Entity"):
        entity = _parse_entity(entity_element)
        if entity is None:
            logger.debug("Skipping Entity element without Name")
            continue
        entities.append(entity)

    logger.debug(f"Parsed {len(entities)} entities from {path}")
    return sorted(entities, key=lambda e: e.logical_name)
