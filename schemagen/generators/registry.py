"""Ordered registry of generators with newest-first lookup.

Lookup scans from the most recently registered generator backwards and
returns the first one whose type and matcher both accept the request. Later
registrations therefore override earlier ones (including the built-in set)
without removing them.

The registry is plain mutable state with no locking: register generators
during start-up, then look up from as many callers as needed.
"""

import logging
from typing import Any, Hashable, Iterable, Iterator

from ..config import SchemagenConfig, get_config
from .defaults import register_defaults
from .generator import Algorithm, Generator, Matcher

logger = logging.getLogger(__name__)


def _describe(type: Hashable) -> Any:
    return getattr(type, "value", type)


class GeneratorRegistry:
    """Insertion-ordered collection of generators plus lookup/dispatch."""

    def __init__(self, instances: Iterable[Generator] | None = None):
        self.instances: list[Generator] = list(instances or [])

    @classmethod
    def with_defaults(cls, config: SchemagenConfig | None = None) -> "GeneratorRegistry":
        """New registry seeded with the built-in scalar and format generators."""
        registry = cls()
        register_defaults(registry, config or get_config())
        return registry

    def __len__(self) -> int:
        return len(self.instances)

    def __iter__(self) -> Iterator[Generator]:
        return iter(self.instances)

    def create(self, type: Hashable, matcher: Matcher, algorithm: Algorithm) -> Generator:
        """Build a generator and append it to the registry.

        Raises:
            MalformedAlgorithmError: If `algorithm` is not callable (nothing is appended)
        """
        return self.register(Generator(type, matcher, algorithm))

    def register(self, generator: Generator) -> Generator:
        """Append an already-built generator."""
        self.instances.append(generator)
        logger.debug(
            "Registered generator for %s (matcher=%r)",
            _describe(generator.type),
            generator.matcher,
        )
        return generator

    def find(self, type: Hashable, attribute_name: Any) -> Generator | None:
        """Most recently registered generator matching type and name, or None."""
        for generator in reversed(self.instances):
            if generator.matches(type, attribute_name):
                return generator
        return None

    def trigger(self, type: Hashable, attribute_name: Any, attribute: Any = None) -> Any:
        """Generate a value for the attribute, or None if no generator matches.

        A miss logs one warning and returns None so callers can decide whether
        a missing generator is fatal. Errors raised by the algorithm propagate.
        """
        generator = self.find(type, attribute_name)
        if generator is None:
            logger.warning(
                "Could not find a generator for attribute %r (type=%r, matching %r)",
                getattr(attribute, "name", None),
                _describe(type),
                str(attribute_name),
            )
            return None
        return generator.trigger(attribute)

    def snapshot(self) -> list[Generator]:
        """Copy of the current generator sequence, for restore()."""
        return list(self.instances)

    def restore(self, instances: Iterable[Generator]) -> None:
        """Replace the full generator sequence."""
        self.instances = list(instances)

    def clear(self) -> None:
        self.instances.clear()


# =============================================================================
# Process-wide registry
# =============================================================================

_registry: GeneratorRegistry | None = None


def get_registry() -> GeneratorRegistry:
    """Get the process-wide registry, seeding it with defaults on first use."""
    global _registry
    if _registry is None:
        _registry = GeneratorRegistry.with_defaults()
    return _registry


def set_registry(registry: GeneratorRegistry) -> None:
    """Replace the process-wide registry."""
    global _registry
    _registry = registry


def reset_registry() -> None:
    """Drop the process-wide registry (rebuilt from config on next get_registry())."""
    global _registry
    _registry = None


def create(type: Hashable, matcher: Matcher, algorithm: Algorithm) -> Generator:
    """Register a custom generator on the process-wide registry."""
    return get_registry().create(type, matcher, algorithm)


def find(type: Hashable, attribute_name: Any) -> Generator | None:
    return get_registry().find(type, attribute_name)


def trigger(type: Hashable, attribute_name: Any, attribute: Any = None) -> Any:
    """Generate a value using the process-wide registry."""
    return get_registry().trigger(type, attribute_name, attribute)
