"""dataverse-schema-generator - JSON Schema documents from Dataverse customizations.xml"""

# Package version, kept in sync with pyproject.toml
__version__ = "0.1.0"
