"""Schema validation module for Sahayak."""

from sahayak.core.schema.validator import json_schema, schema_hint, validate

__all__ = ["validate", "json_schema", "schema_hint"]
