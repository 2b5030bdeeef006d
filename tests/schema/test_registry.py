"""Tests for dataverse_schema.schema.registry -- option set resolution order."""

from dataverse_schema.schema.models import OptionValue
from dataverse_schema.schema.registry import (
    OptionSetDefinition,
    OptionSetRegistry,
    builtin_option_sets,
    default_registry,
)

COLOURS = OptionSetDefinition(
    name="new_colour",
    description="Colours",
    attribute_logical_names=("new_favouritecolour",),
    values=(OptionValue(value=1, label="Red"), OptionValue(value=2, label="Blue")),
)


class TestBuiltIns:
    def test_country_option_set(self):
        registry = default_registry()
        values = registry.resolve("in_countryos", "anything")
        assert values is not None
        assert len(values) == 194
        assert values[0] == OptionValue(value=1, label="Afghanistan")
        assert values[-1] == OptionValue(value=194, label="Zimbabwe")
        assert registry.description("in_countryos", "anything") == "in_countryos enum (194 values)"

    def test_sync_status_option_set(self):
        values = default_registry().resolve(None, "in_syncstatus")
        assert values == (OptionValue(value=1, label="OK"), OptionValue(value=2, label="Error"))

    def test_names(self):
        assert default_registry().names == ["in_countryos", "in_syncstatusos"]
        assert len(builtin_option_sets()) == 2


class TestResolutionOrder:
    def test_by_option_set_name(self):
        registry = OptionSetRegistry([COLOURS])
        assert registry.resolve("new_colour", "unrelated") == COLOURS.values

    def test_name_lookup_is_case_insensitive(self):
        registry = OptionSetRegistry([COLOURS])
        assert registry.resolve("NEW_Colour", "unrelated") == COLOURS.values
        assert registry.is_registered("New_Colour")
        assert "NEW_COLOUR" in registry

    def test_by_attribute_index(self):
        registry = OptionSetRegistry([COLOURS])
        assert registry.resolve(None, "new_favouritecolour") == COLOURS.values
        assert registry.resolve("", "NEW_FavouriteColour") == COLOURS.values

    def test_unknown_name_falls_back_to_attribute_index(self):
        registry = OptionSetRegistry([COLOURS])
        assert registry.resolve("not_registered", "new_favouritecolour") == COLOURS.values

    def test_name_takes_priority_over_attribute_index(self):
        registry = default_registry().register(COLOURS)
        # Attribute index points at the country set, explicit name wins
        assert registry.resolve("new_colour", "in_country") == COLOURS.values

    def test_nothing_found(self):
        registry = OptionSetRegistry([COLOURS])
        assert registry.resolve("missing", "missing") is None
        assert registry.description("missing", "missing") is None

    def test_description_follows_same_order(self):
        registry = OptionSetRegistry([COLOURS])
        assert registry.description(None, "new_favouritecolour") == "Colours"


class TestRegistration:
    def test_register_returns_new_registry(self):
        base = default_registry()
        extended = base.register(COLOURS)

        assert extended.is_registered("new_colour")
        assert not base.is_registered("new_colour")
        assert len(extended) == len(base) + 1

    def test_register_upserts_by_name(self):
        replacement = OptionSetDefinition(
            name="IN_SYNCSTATUSOS",
            values=(OptionValue(value=9, label="Pending"),),
        )
        registry = default_registry().register(replacement)

        assert registry.resolve("in_syncstatusos", "x") == replacement.values
        # Existing attribute index entries still point at the replaced set
        assert registry.resolve(None, "in_syncstatus") == replacement.values
        assert len(registry) == 2

    def test_register_overwrites_attribute_index(self):
        remapped = OptionSetDefinition(
            name="new_region",
            attribute_logical_names=("in_country",),
            values=(OptionValue(value=1, label="EMEA"),),
        )
        registry = default_registry().register(remapped)
        assert registry.resolve(None, "in_country") == remapped.values

    def test_empty_registry(self):
        registry = OptionSetRegistry()
        assert len(registry) == 0
        assert registry.resolve("in_countryos", "in_country") is None
