"""Pydantic models for schemagen."""

from .attribute import (
    SchemaType,
    FORMAT_TYPES,
    Attribute,
    normalize_type,
    load_attributes,
)

__all__ = [
    "SchemaType",
    "FORMAT_TYPES",
    "Attribute",
    "normalize_type",
    "load_attributes",
]
