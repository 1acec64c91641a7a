"""Attribute models and schema-file loading for schemagen.

An Attribute describes one named field: its candidate types and the
JSON-Schema-style constraints a generated value must satisfy. Generators only
read attributes; nothing in schemagen mutates them.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# =============================================================================
# Type tags
# =============================================================================


class SchemaType(str, Enum):
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ENUM = "enum"
    UUID = "uuid"
    DATE = "date"
    DATE_TIME = "date-time"
    TIME = "time"
    EMAIL = "email"
    HOSTNAME = "hostname"
    URI = "uri"
    IPV4 = "ipv4"
    IPV6 = "ipv6"


# JSON Schema type names that map onto a different tag
_TYPE_ALIASES = {
    "number": SchemaType.FLOAT,
    "double": SchemaType.FLOAT,
    "int": SchemaType.INTEGER,
    "bool": SchemaType.BOOLEAN,
    "str": SchemaType.STRING,
}

# String formats promoted to their own tag
FORMAT_TYPES = {
    "uuid": SchemaType.UUID,
    "date": SchemaType.DATE,
    "date-time": SchemaType.DATE_TIME,
    "time": SchemaType.TIME,
    "email": SchemaType.EMAIL,
    "hostname": SchemaType.HOSTNAME,
    "uri": SchemaType.URI,
    "url": SchemaType.URI,
    "ipv4": SchemaType.IPV4,
    "ipv6": SchemaType.IPV6,
}

_NESTED_TYPES = {"object", "array"}


def normalize_type(tag: Any) -> Any:
    """Map a type name onto its SchemaType tag; unknown names pass through."""
    if isinstance(tag, SchemaType) or not isinstance(tag, str):
        return tag
    lowered = tag.lower()
    if lowered in _TYPE_ALIASES:
        return _TYPE_ALIASES[lowered]
    try:
        return SchemaType(lowered)
    except ValueError:
        return tag


# =============================================================================
# Attribute
# =============================================================================


class Attribute(BaseModel):
    """A named field with candidate types and schema constraints."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", allow_inf_nan=False)

    name: str
    types: list[Any] = Field(default_factory=list)
    description: str | None = None
    format: str | None = None
    min_length: int | None = Field(default=None, alias="minLength", ge=0)
    max_length: int | None = Field(default=None, alias="maxLength", ge=0)
    minimum: int | float | None = None
    maximum: int | float | None = None
    multiple_of: int | float | None = Field(default=None, alias="multipleOf")
    exclusive_minimum: bool | int | float | None = Field(
        default=None,
        alias="exclusiveMinimum",
        description="Draft-4 boolean flag or draft-6+ exclusive bound",
    )
    exclusive_maximum: bool | int | float | None = Field(
        default=None,
        alias="exclusiveMaximum",
        description="Draft-4 boolean flag or draft-6+ exclusive bound",
    )
    enum: list[Any] | None = None

    @field_validator("types", mode="before")
    @classmethod
    def _coerce_types(cls, value: Any) -> list[Any]:
        if value is None:
            return []
        if isinstance(value, (str, SchemaType)) or not isinstance(value, (list, tuple)):
            value = [value]
        return [normalize_type(tag) for tag in value]

    @model_validator(mode="after")
    def _promote_format(self) -> "Attribute":
        promoted = FORMAT_TYPES.get((self.format or "").lower())
        if promoted is not None and SchemaType.STRING in self.types:
            types = [promoted if tag == SchemaType.STRING else tag for tag in self.types]
            self.types = types
        return self

    @classmethod
    def from_schema(cls, name: str, definition: dict[str, Any]) -> "Attribute":
        """Build an attribute from a JSON-Schema-style property definition.

        Example:
            Attribute.from_schema("age", {"type": "integer", "minimum": 0})

        Raises:
            ValueError: If the property declares a nested object/array type
        """
        definition = dict(definition)
        declared = definition.pop("type", None)
        declared_list = declared if isinstance(declared, list) else [declared]
        nested = [t for t in declared_list if isinstance(t, str) and t in _NESTED_TYPES]
        if nested:
            raise ValueError(
                f"Attribute {name!r} has nested type {nested[0]!r}; "
                "only scalar attributes can be generated"
            )
        definition.pop("name", None)
        return cls(name=name, types=declared, **definition)

    @property
    def bias_type(self) -> Any:
        """Type tag used to select a generator for this attribute."""
        if self.enum:
            return SchemaType.ENUM
        return self.types[0] if self.types else None

    def constraint(self, key: str) -> Any:
        """Value of a constraint by JSON Schema key or field name; None if unset."""
        if key in type(self).model_fields:
            return getattr(self, key)
        for field_name, info in type(self).model_fields.items():
            if info.alias == key:
                return getattr(self, field_name)
        return None


# =============================================================================
# Schema files
# =============================================================================


def load_attributes(path: Path | str) -> list[Attribute]:
    """Load flat scalar attributes from a YAML or JSON schema file.

    The file is either a JSON-Schema object with a `properties` mapping or a
    bare mapping of attribute name to property definition.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a mapping of property definitions
    """
    path = Path(path)
    with open(path) as f:
        if path.suffix.lower() == ".json":
            data = json.load(f)
        else:
            data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping of attribute definitions")

    properties = data.get("properties", data)
    if not isinstance(properties, dict):
        raise ValueError(f"{path}: 'properties' must be a mapping")

    attributes = []
    for name, definition in properties.items():
        if not isinstance(definition, dict):
            raise ValueError(f"{path}: definition for {name!r} must be a mapping")
        attributes.append(Attribute.from_schema(str(name), definition))
    return attributes
