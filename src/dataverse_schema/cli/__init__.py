"""Command line interface for dataverse-schema-generator."""
