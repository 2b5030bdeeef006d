"""Configuration management for dataverse-schema-generator.

Defaults for the command line come from environment variables prefixed with
DATAVERSE_SCHEMA_ (for example DATAVERSE_SCHEMA_BASE_ID) or a .env file in the
working directory. Command line flags always override configuration.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dataverse_schema.schema.models import GeneratorOptions

DEFAULT_BASE_ID = "https://schemas.example.com/dataverse/"


class GeneratorConfig(BaseSettings):
    """Generation defaults and logging settings."""

    output_path: Path = Field(
        default=Path("./schemas"),
        description="Output directory for generated JSON Schema files",
    )
    base_id: str = Field(
        default=DEFAULT_BASE_ID,
        description="Base URI for the $id property in generated schemas",
    )
    filter_valid_for_read_api: bool = Field(
        default=True,
        description="Skip attributes where ValidForReadApi = false",
    )
    filter_is_retrievable: bool = Field(
        default=True,
        description="Skip attributes where IsRetrievable = false",
    )
    generate_event_envelopes: bool = Field(
        default=False,
        description="Generate EventBus envelope schemas for each entity",
    )
    pretty_print: bool = Field(default=True, description="Indent JSON output")

    log_level: str = Field(default="INFO", description="Log level for console output")
    log_file: Optional[Path] = Field(default=None, description="Optional log file path")

    model_config = SettingsConfigDict(
        env_prefix="DATAVERSE_SCHEMA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @field_validator("base_id")
    @classmethod
    def base_id_not_empty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("base_id must not be empty")
        return value.strip()

    def to_options(
        self,
        input_path: str | Path,
        entity_filter: Iterable[str] = (),
        **overrides: Any,
    ) -> GeneratorOptions:
        """Build GeneratorOptions for one run, with explicit overrides applied."""
        values: dict[str, Any] = {
            "input_path": str(input_path),
            "output_path": str(self.output_path),
            "base_id": self.base_id,
            "filter_valid_for_read_api": self.filter_valid_for_read_api,
            "filter_is_retrievable": self.filter_is_retrievable,
            "entity_filter": frozenset(entity_filter),
            "generate_event_envelopes": self.generate_event_envelopes,
            "pretty_print": self.pretty_print,
        }
        for key, value in overrides.items():
            if value is not None:
                values[key] = str(value) if key == "output_path" else value
        return GeneratorOptions(**values)


_config: Optional[GeneratorConfig] = None


def get_config() -> GeneratorConfig:
    """Get or create the process-wide configuration instance."""
    global _config
    if _config is None:
        _config = GeneratorConfig()
    return _config


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() re-reads the environment."""
    global _config
    _config = None
