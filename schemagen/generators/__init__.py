"""Generator registry and built-in constraint-aware generators.

Typical use:
    from schemagen.generators import create, trigger

    create("uuid", r"_id$", lambda attribute: "fixed-id")
    value = trigger(attribute.bias_type, attribute.name, attribute)
"""

from .errors import (
    GeneratorError,
    MalformedAlgorithmError,
    UnsatisfiableConstraintError,
)
from .generator import Algorithm, Generator, Matcher, compile_matcher
from .registry import (
    GeneratorRegistry,
    get_registry,
    set_registry,
    reset_registry,
    create,
    find,
    trigger,
)
from .defaults import MATCH_ANYTHING, register_defaults

__all__ = [
    # Errors
    "GeneratorError",
    "MalformedAlgorithmError",
    "UnsatisfiableConstraintError",
    # Generator
    "Algorithm",
    "Generator",
    "Matcher",
    "compile_matcher",
    # Registry
    "GeneratorRegistry",
    "get_registry",
    "set_registry",
    "reset_registry",
    "create",
    "find",
    "trigger",
    # Defaults
    "MATCH_ANYTHING",
    "register_defaults",
]
