"""Bundled JSON Schemas for repo guard documents."""

from repoguard.schemas.registry import SchemaRegistry, get_registry
from repoguard.schemas.validator import schema_errors, validate_data

__all__ = ["SchemaRegistry", "get_registry", "schema_errors", "validate_data"]
