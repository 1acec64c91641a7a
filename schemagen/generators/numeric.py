"""Bound arithmetic shared by the integer and float generators.

Both generators work on an integer grid: integers use a spacing of 1, floats
use a decimal spacing fine enough to hold every bound and multipleOf exactly.
Exclusive bounds drop the endpoint grid point, so the same code covers the
integer unit step and the float "strictly greater than" case.
"""

import decimal
import random
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal

from .errors import UnsatisfiableConstraintError

Number = int | float | Decimal

_CONTEXT = decimal.Context(prec=64)


def to_decimal(value: Number) -> Decimal:
    """Exact decimal for a schema number (floats use their shortest repr)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def decimal_places(value: Number | None) -> int:
    """Number of significant digits after the decimal point (0 for integers)."""
    if value is None or isinstance(value, bool):
        return 0
    exponent = to_decimal(value).normalize(_CONTEXT).as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def effective_bound(
    limit: Number | None,
    exclusive: bool | Number | None,
    *,
    lower: bool,
) -> tuple[Number | None, bool]:
    """Fold an exclusive flag or exclusive limit into (limit, is_exclusive).

    Accepts draft-4 boolean exclusiveMinimum/exclusiveMaximum as well as the
    numeric form, where the exclusive value is a bound of its own. When both
    a plain and a numeric exclusive limit are given the tighter one wins.
    """
    if exclusive is None or exclusive is False:
        return limit, False
    if exclusive is True:
        return limit, limit is not None
    if limit is None:
        return exclusive, True
    tighter = max(limit, exclusive) if lower else min(limit, exclusive)
    return tighter, tighter == exclusive


def resolve_window(
    lower: Number | None,
    upper: Number | None,
    default_lower: Number,
    default_upper: Number,
) -> tuple[Number, Number]:
    """Fill missing bounds from defaults.

    A lone bound outside the default window moves the missing side one
    default span away from it instead of inverting the window.
    """
    span = default_upper - default_lower
    if lower is None:
        lower = default_lower if upper is None or default_lower <= upper else upper - span
    if upper is None:
        upper = default_upper if default_upper >= lower else lower + span
    return lower, upper


def grid_window(
    lower: Number,
    upper: Number,
    quantum: Decimal,
    *,
    lower_exclusive: bool = False,
    upper_exclusive: bool = False,
) -> tuple[int, int]:
    """Inclusive range of grid indices k with k * quantum inside the bounds.

    Raises:
        UnsatisfiableConstraintError: If no grid point satisfies the bounds
    """
    with decimal.localcontext(_CONTEXT):
        low_bound = to_decimal(lower)
        high_bound = to_decimal(upper)
        low = (low_bound / quantum).to_integral_value(rounding=ROUND_CEILING)
        high = (high_bound / quantum).to_integral_value(rounding=ROUND_FLOOR)
        if lower_exclusive and low * quantum == low_bound:
            low += 1
        if upper_exclusive and high * quantum == high_bound:
            high -= 1

    if low > high:
        raise UnsatisfiableConstraintError(
            f"No value in window {'(' if lower_exclusive else '['}{lower}, "
            f"{upper}{')' if upper_exclusive else ']'}"
        )
    return int(low), int(high)


def grid_step(multiple_of: Number | None, quantum: Decimal) -> int | None:
    """multipleOf expressed in grid units, or None when unconstrained.

    A step that is not a whole number of grid units is widened to its
    smallest whole multiple (multipleOf 2.5 on the integer grid becomes 5).
    """
    if multiple_of is None or isinstance(multiple_of, bool) or multiple_of == 0:
        return None
    with decimal.localcontext(_CONTEXT):
        numerator, _ = (to_decimal(multiple_of) / quantum).as_integer_ratio()
    return abs(numerator)


def pick_on_grid(
    low: int,
    high: int,
    step: int | None,
    rng: random.Random,
) -> int:
    """Choose a grid index in [low, high].

    Without a step any index is drawn uniformly. With a step the largest
    multiple of it inside the window is returned; when the window holds no
    multiple, `high` is returned as the closest in-range index.
    """
    if step is None:
        return rng.randint(low, high)
    candidate = (high // step) * step
    if candidate >= low:
        return candidate
    return high


def quantum_for(places: int) -> Decimal:
    """Grid spacing 10**-places."""
    return Decimal(1).scaleb(-places)
