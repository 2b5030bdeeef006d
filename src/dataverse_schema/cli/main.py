"""Main CLI entry point for dataverse-schema."""  # pragma: no cover

from dataverse_schema.cli.app import app  # pragma: no cover

# Register commands
from dataverse_schema.cli.commands import (  # noqa: F401  # pragma: no cover
    batch,
    generate,
)

if __name__ == "__main__":  # pragma: no cover
    app()
