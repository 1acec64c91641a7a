"""Generator value type: a (type, matcher, algorithm) triple.

A Generator claims a target type, decides which attribute names it applies
to, and wraps the callable that produces a value. Registration is a separate
step handled by GeneratorRegistry.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Protocol

from .errors import MalformedAlgorithmError


class Algorithm(Protocol):
    """Callable producing a value for an attribute.

    Args:
        attribute: The attribute being generated (may be None when triggered bare)
    """

    def __call__(self, attribute: Any) -> Any: ...


Matcher = str | re.Pattern | Callable[[str], bool] | None


def compile_matcher(matcher: Matcher) -> Callable[[str], bool]:
    """Turn a matcher into a predicate over attribute names.

    Strings are compiled as case-insensitive regular expressions. Patterns
    match anywhere in the name unless anchored. None matches every name.

    Raises:
        TypeError: If the matcher is none of the supported kinds
        re.error: If a string matcher is not a valid regular expression
    """
    if matcher is None:
        return lambda name: True
    if isinstance(matcher, str):
        pattern = re.compile(matcher, re.IGNORECASE)
        return lambda name: pattern.search(name) is not None
    if isinstance(matcher, re.Pattern):
        return lambda name: matcher.search(name) is not None
    if callable(matcher):
        return matcher
    raise TypeError(f"Unsupported matcher: {matcher!r}")


@dataclass(frozen=True)
class Generator:
    """Immutable binding of a target type, a name matcher and an algorithm."""

    type: Hashable
    matcher: Matcher
    algorithm: Algorithm
    _predicate: Callable[[str], bool] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if not callable(self.algorithm):
            raise MalformedAlgorithmError(
                f"Generator algorithm for {self.type!r} must be callable, "
                f"got {type(self.algorithm).__name__}: {self.algorithm!r}"
            )
        object.__setattr__(self, "_predicate", compile_matcher(self.matcher))

    def trigger(self, attribute: Any = None) -> Any:
        """Run the algorithm against the attribute and return its result."""
        return self.algorithm(attribute)

    def matches(self, type: Hashable, attribute_name: Any) -> bool:
        """True if this generator targets `type` and accepts the attribute name."""
        return self.type == type and bool(self._predicate(str(attribute_name)))
