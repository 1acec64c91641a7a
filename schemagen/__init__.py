"""schemagen: constraint-aware synthetic values for schema attributes."""

__version__ = "0.1.0"

from .config import SchemagenConfig, configure, get_config, reset_config
from .core.models import Attribute, SchemaType, load_attributes
from .generators import (
    Generator,
    GeneratorRegistry,
    MalformedAlgorithmError,
    UnsatisfiableConstraintError,
    create,
    find,
    trigger,
)

__all__ = [
    "__version__",
    "SchemagenConfig",
    "configure",
    "get_config",
    "reset_config",
    "Attribute",
    "SchemaType",
    "load_attributes",
    "Generator",
    "GeneratorRegistry",
    "MalformedAlgorithmError",
    "UnsatisfiableConstraintError",
    "create",
    "find",
    "trigger",
]
