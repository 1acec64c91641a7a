"""Built-in generators registered at the weakest priority.

Each algorithm reads constraint metadata off the attribute and returns a value
that satisfies it:
- string: length within [minLength, maxLength]
- integer / float: within minimum/maximum (inclusive or exclusive), on multipleOf
- enum: a member of the attribute's enum
- boolean and string formats (uuid, email, date-time, ...) via Faker

Any scalar attribute carrying a non-empty enum gets a member of that enum.
"""

import random
import string
from typing import TYPE_CHECKING, Any, Callable

from faker import Faker

from ..config import SchemagenConfig
from ..core.models.attribute import SchemaType
from .errors import UnsatisfiableConstraintError
from .numeric import (
    decimal_places,
    effective_bound,
    grid_step,
    grid_window,
    pick_on_grid,
    quantum_for,
    resolve_window,
    to_decimal,
)

if TYPE_CHECKING:
    from .registry import GeneratorRegistry

MATCH_ANYTHING = r".*"

_STRING_ALPHABET = string.ascii_letters + string.digits

_MISSING = object()


def _constraint(attribute: Any, key: str) -> Any:
    if attribute is None:
        return None
    return attribute.constraint(key)


def _enum_member(attribute: Any, rng: random.Random) -> Any:
    """A random enum member, or _MISSING if the attribute has no enum."""
    options = _constraint(attribute, "enum")
    if not options:
        return _MISSING
    return rng.choice(options)


# =============================================================================
# Scalar algorithms
# =============================================================================


def generate_string(attribute: Any, rng: random.Random, config: SchemagenConfig) -> str:
    """Random alphanumeric string whose length honours minLength/maxLength."""
    member = _enum_member(attribute, rng)
    if member is not _MISSING:
        return member

    min_length = _constraint(attribute, "minLength")
    max_length = _constraint(attribute, "maxLength")
    if min_length is None:
        min_length = config.string_min_length
        if max_length is not None:
            min_length = min(min_length, max_length)
    if max_length is None:
        max_length = max(config.string_max_length, min_length)
    if min_length > max_length:
        raise UnsatisfiableConstraintError(
            f"minLength {min_length} exceeds maxLength {max_length}"
        )

    length = rng.randint(min_length, max_length)
    return "".join(rng.choices(_STRING_ALPHABET, k=length))


def _bounds(attribute: Any):
    lower, lower_exclusive = effective_bound(
        _constraint(attribute, "minimum"),
        _constraint(attribute, "exclusiveMinimum"),
        lower=True,
    )
    upper, upper_exclusive = effective_bound(
        _constraint(attribute, "maximum"),
        _constraint(attribute, "exclusiveMaximum"),
        lower=False,
    )
    return lower, lower_exclusive, upper, upper_exclusive


def generate_integer(attribute: Any, rng: random.Random, config: SchemagenConfig) -> int:
    """Integer within the attribute's bounds, on multipleOf when set.

    Exclusive bounds step one unit inward. With multipleOf the largest
    qualifying multiple is chosen (e.g. [60, 70] with multipleOf 13 gives 65).
    """
    member = _enum_member(attribute, rng)
    if member is not _MISSING:
        return member

    lower, lower_exclusive, upper, upper_exclusive = _bounds(attribute)
    lower, upper = resolve_window(
        lower, upper, config.integer_minimum, config.integer_maximum
    )
    quantum = quantum_for(0)
    low, high = grid_window(
        lower,
        upper,
        quantum,
        lower_exclusive=lower_exclusive,
        upper_exclusive=upper_exclusive,
    )
    step = grid_step(_constraint(attribute, "multipleOf"), quantum)
    return pick_on_grid(low, high, step, rng)


def generate_float(attribute: Any, rng: random.Random, config: SchemagenConfig) -> float:
    """Float within the attribute's bounds, on multipleOf when set.

    Values are drawn from a decimal grid fine enough to represent every bound
    exactly, so an exclusive bound over a tight window returns the other
    endpoint ({99.49, 99.50, exclusiveMinimum} gives 99.5).
    """
    member = _enum_member(attribute, rng)
    if member is not _MISSING:
        return member

    lower, lower_exclusive, upper, upper_exclusive = _bounds(attribute)
    multiple_of = _constraint(attribute, "multipleOf")
    places = max(
        config.float_precision,
        decimal_places(lower),
        decimal_places(upper),
        decimal_places(multiple_of),
    )
    lower, upper = resolve_window(
        lower, upper, config.float_minimum, config.float_maximum
    )
    quantum = quantum_for(places)
    low, high = grid_window(
        lower,
        upper,
        quantum,
        lower_exclusive=lower_exclusive,
        upper_exclusive=upper_exclusive,
    )
    index = pick_on_grid(low, high, grid_step(multiple_of, quantum), rng)
    return float(to_decimal(index) * quantum)


def generate_enum(attribute: Any, rng: random.Random) -> Any:
    """A member of the attribute's enum."""
    member = _enum_member(attribute, rng)
    if member is _MISSING:
        raise UnsatisfiableConstraintError(
            f"Attribute {getattr(attribute, 'name', None)!r} has no enum values"
        )
    return member


def generate_boolean(attribute: Any, rng: random.Random) -> bool:
    member = _enum_member(attribute, rng)
    if member is not _MISSING:
        return member
    return rng.random() < 0.5


# =============================================================================
# Format algorithms (Faker)
# =============================================================================

FORMAT_PROVIDERS: dict[SchemaType, Callable[[Faker], Any]] = {
    SchemaType.UUID: lambda fake: fake.uuid4(),
    SchemaType.DATE: lambda fake: fake.date(),
    SchemaType.DATE_TIME: lambda fake: fake.iso8601(),
    SchemaType.TIME: lambda fake: fake.time(),
    SchemaType.EMAIL: lambda fake: fake.email(),
    SchemaType.HOSTNAME: lambda fake: fake.hostname(),
    SchemaType.URI: lambda fake: fake.uri(),
    SchemaType.IPV4: lambda fake: fake.ipv4(),
    SchemaType.IPV6: lambda fake: fake.ipv6(),
}


def _format_algorithm(
    provider: Callable[[Faker], Any], fake: Faker, rng: random.Random
) -> Callable[[Any], Any]:
    def algorithm(attribute: Any) -> Any:
        member = _enum_member(attribute, rng)
        if member is not _MISSING:
            return member
        return provider(fake)

    return algorithm


# =============================================================================
# Registration
# =============================================================================


def build_faker(config: SchemagenConfig) -> Faker:
    """Faker for the configured locale, seeded when the config has a seed."""
    fake = Faker(config.faker_locale)
    if config.seed is not None:
        fake.seed_instance(config.seed)
    return fake


def register_defaults(registry: "GeneratorRegistry", config: SchemagenConfig) -> None:
    """Register the built-in generators onto `registry`.

    Call this before any custom registrations so later generators for the
    same type override these.
    """
    rng = random.Random(config.seed)
    fake = build_faker(config)

    for schema_type, provider in FORMAT_PROVIDERS.items():
        registry.create(schema_type, MATCH_ANYTHING, _format_algorithm(provider, fake, rng))

    registry.create(SchemaType.BOOLEAN, MATCH_ANYTHING, lambda a: generate_boolean(a, rng))
    registry.create(SchemaType.ENUM, MATCH_ANYTHING, lambda a: generate_enum(a, rng))
    registry.create(
        SchemaType.STRING, MATCH_ANYTHING, lambda a: generate_string(a, rng, config)
    )
    registry.create(
        SchemaType.INTEGER, MATCH_ANYTHING, lambda a: generate_integer(a, rng, config)
    )
    registry.create(
        SchemaType.FLOAT, MATCH_ANYTHING, lambda a: generate_float(a, rng, config)
    )
