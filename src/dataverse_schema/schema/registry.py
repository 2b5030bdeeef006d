"""Global option set registry.

Holds option sets that are defined outside individual attribute definitions
(global option sets referenced by name but not embedded in customizations.xml),
plus an index from attribute logical name to option set name.

Resolution order for an attribute:
  1. option_set_name  -> registered option set with that name
  2. logical_name     -> option set mapped to that attribute name
  3. nothing found    -> None (the attribute stays a plain integer)

A registry is an immutable value. register() returns a new registry with the
definition merged over the existing entries, so callers build the registry
they need before generation starts and pass it to the schema builder.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from dataverse_schema.schema.countries import COUNTRY_OPTIONS
from dataverse_schema.schema.models import OptionValue


@dataclass(frozen=True)
class OptionSetDefinition:
    """A global option set with its values and metadata."""

    name: str  # e.g. "in_countryos", matched case-insensitively
    values: tuple[OptionValue, ...]
    description: str | None = None
    attribute_logical_names: tuple[str, ...] = field(default_factory=tuple)


class OptionSetRegistry:
    """Read-only table of global option sets keyed case-insensitively by name."""

    def __init__(self, definitions: Iterable[OptionSetDefinition] = ()):
        self._by_name: dict[str, OptionSetDefinition] = {}
        self._by_attribute: dict[str, str] = {}
        for definition in definitions:
            self._add(definition)

    def _add(self, definition: OptionSetDefinition) -> None:
        self._by_name[definition.name.lower()] = definition
        for attribute_name in definition.attribute_logical_names:
            self._by_attribute[attribute_name.lower()] = definition.name.lower()

    @property
    def names(self) -> list[str]:
        return sorted(definition.name for definition in self._by_name.values())

    def register(self, *definitions: OptionSetDefinition) -> "OptionSetRegistry":
        """Return a new registry with the given definitions upserted by name."""
        registry = OptionSetRegistry()
        registry._by_name = dict(self._by_name)
        registry._by_attribute = dict(self._by_attribute)
        for definition in definitions:
            registry._add(definition)
        return registry

    def is_registered(self, option_set_name: str) -> bool:
        return option_set_name.lower() in self._by_name

    def _lookup(
        self, option_set_name: str | None, attribute_logical_name: str
    ) -> OptionSetDefinition | None:
        if option_set_name:
            definition = self._by_name.get(option_set_name.lower())
            if definition is not None:
                return definition

        mapped_name = self._by_attribute.get(attribute_logical_name.lower())
        if mapped_name is not None:
            return self._by_name.get(mapped_name)

        return None

    def resolve(
        self, option_set_name: str | None, attribute_logical_name: str
    ) -> tuple[OptionValue, ...] | None:
        """Find option values by option set name first, then by attribute name."""
        definition = self._lookup(option_set_name, attribute_logical_name)
        return definition.values if definition is not None else None

    def description(self, option_set_name: str | None, attribute_logical_name: str) -> str | None:
        """Find the option set description using the same order as resolve()."""
        definition = self._lookup(option_set_name, attribute_logical_name)
        return definition.description if definition is not None else None

    def __len__(self) -> int:
        return len(self._by_name)

    def __contains__(self, option_set_name: object) -> bool:
        return isinstance(option_set_name, str) and self.is_registered(option_set_name)


def builtin_option_sets() -> list[OptionSetDefinition]:
    """Option sets known to be referenced globally by the source solutions."""
    return [
        OptionSetDefinition(
            name="in_countryos",
            description="in_countryos enum (194 values)",
            attribute_logical_names=("in_country",),
            values=tuple(OptionValue(value=value, label=label) for value, label in COUNTRY_OPTIONS),
        ),
        OptionSetDefinition(
            name="in_syncstatusos",
            description="in_syncstatusos enum (2 values)",
            attribute_logical_names=("in_syncstatus",),
            values=(
                OptionValue(value=1, label="OK"),
                OptionValue(value=2, label="Error"),
            ),
        ),
    ]


def default_registry() -> OptionSetRegistry:
    """Registry pre-seeded with the built-in option sets."""
    return OptionSetRegistry(builtin_option_sets())
