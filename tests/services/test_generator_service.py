"""Tests for SchemaGeneratorService."""

import json
import threading
from dataclasses import replace

import pytest

from dataverse_schema.file_utils import DocumentReadError, FileWriteError
from dataverse_schema.schema.models import Entity
from dataverse_schema.schema.registry import OptionSetRegistry
from dataverse_schema.schema.writer import SchemaWriter
from dataverse_schema.services import GenerationCancelledError, SchemaGeneratorService


@pytest.fixture
def messages() -> list[str]:
    return []


@pytest.fixture
def service(messages) -> SchemaGeneratorService:
    return SchemaGeneratorService(on_progress=messages.append)


def test_parse_entities(service, customizations_file):
    entities = service.parse_entities(customizations_file)
    assert [e.logical_name for e in entities] == ["account", "contact"]


def test_parse_entities_missing_file(service, tmp_path):
    with pytest.raises(DocumentReadError):
        service.parse_entities(tmp_path / "nope.xml")


class TestFilterEntities:
    ENTITIES = [
        Entity(name="Account", logical_name="account"),
        Entity(name="Contact", logical_name="contact"),
        Entity(name="Lead", logical_name="lead"),
    ]

    def test_case_insensitive(self, service):
        filtered = service.filter_entities(self.ENTITIES, ["Account", " LEAD "])
        assert [e.logical_name for e in filtered] == ["account", "lead"]

    def test_empty_filter_keeps_everything(self, service):
        assert service.filter_entities(self.ENTITIES, []) == self.ENTITIES
        assert service.filter_entities(self.ENTITIES, ["", "  "]) == self.ENTITIES

    def test_unknown_names_match_nothing(self, service):
        assert service.filter_entities(self.ENTITIES, ["opportunity"]) == []


class TestGenerate:
    def test_writes_entity_schemas(self, service, messages, options, customizations_file, output_dir):
        entities = service.parse_entities(customizations_file)
        result = service.generate(options, entities)

        assert result.entity_schemas_generated == 2
        assert result.event_schemas_generated == 0
        assert sorted(p.name for p in output_dir.iterdir()) == ["account.json", "contact.json"]
        assert messages == [
            "Generated: account.json (12 attributes)",
            "Generated: contact.json (2 attributes)",
        ]

        account = json.loads((output_dir / "account.json").read_text(encoding="utf-8"))
        assert account["$id"] == "https://schemas.example.com/dataverse/account.json"
        assert account["required"] == ["accountid", "name", "ownerid"]

    def test_writes_event_envelopes(self, service, messages, options, customizations_file, output_dir):
        options = replace(options, generate_event_envelopes=True)
        entities = service.parse_entities(customizations_file)
        result = service.generate(options, entities)

        assert result.entity_schemas_generated == 2
        assert result.event_schemas_generated == 2
        assert messages[:2] == [
            "Generated: account.json (12 attributes)",
            "Generated: events/account-event.json",
        ]

        envelope = json.loads(
            (output_dir / "events" / "contact-event.json").read_text(encoding="utf-8")
        )
        assert envelope["properties"]["data"]["$ref"].endswith("/contact.json")

    def test_timestamp_suffix(self, service, options, customizations_file, output_dir):
        options = replace(options, timestamp_suffix="010224_093000", generate_event_envelopes=True)
        service.generate(options, service.parse_entities(customizations_file))

        assert (output_dir / "account_010224_093000.json").is_file()
        assert (output_dir / "events" / "contact-event_010224_093000.json").is_file()

    def test_same_input_same_bytes(self, service, options, customizations_file, tmp_path):
        entities = service.parse_entities(customizations_file)

        first = replace(options, output_path=str(tmp_path / "first"))
        second = replace(options, output_path=str(tmp_path / "second"))
        service.generate(first, entities)
        service.generate(second, entities)

        for name in ("account.json", "contact.json"):
            assert (tmp_path / "first" / name).read_bytes() == (tmp_path / "second" / name).read_bytes()

    def test_injected_registry(self, messages, options, customizations_file, output_dir):
        service = SchemaGeneratorService(registry=OptionSetRegistry(), on_progress=messages.append)
        service.generate(options, service.parse_entities(customizations_file))

        account = json.loads((output_dir / "account.json").read_text(encoding="utf-8"))
        assert account["properties"]["in_country"] == {"type": "integer"}

    def test_cancelled_before_start(self, service, options, customizations_file, output_dir):
        cancel_event = threading.Event()
        cancel_event.set()

        with pytest.raises(GenerationCancelledError):
            service.generate(options, service.parse_entities(customizations_file), cancel_event)

        assert not output_dir.exists()

    def test_cancelled_between_entities(self, options, customizations_file, output_dir):
        cancel_event = threading.Event()
        service = SchemaGeneratorService(on_progress=lambda message: cancel_event.set())

        with pytest.raises(GenerationCancelledError):
            service.generate(options, service.parse_entities(customizations_file), cancel_event)

        # The first entity completes, the second is never started
        assert [p.name for p in output_dir.iterdir()] == ["account.json"]

    def test_event_write_failure_removes_entity_document(
        self, service, messages, options, customizations_file, output_dir, monkeypatch
    ):
        def failing_write(self, entity, document):
            raise FileWriteError("disk full")

        monkeypatch.setattr(SchemaWriter, "write_event_schema", failing_write)
        options = replace(options, generate_event_envelopes=True)

        with pytest.raises(FileWriteError):
            service.generate(options, service.parse_entities(customizations_file))

        assert not (output_dir / "account.json").exists()
        assert messages == []

    def test_no_entities(self, service, options, output_dir):
        result = service.generate(options, [])
        assert result.entity_schemas_generated == 0
        assert not output_dir.exists()
