"""Exceptions raised by generators and the generator registry."""


class GeneratorError(Exception):
    """Base class for generator failures."""


class MalformedAlgorithmError(GeneratorError, TypeError):
    """Raised when a generator is built with an algorithm that cannot be called."""


class UnsatisfiableConstraintError(GeneratorError, ValueError):
    """Raised when an attribute's bounds leave no value to generate."""
