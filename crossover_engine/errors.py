"""
Error types raised by the crossover engine.

Both derive from ValueError so callers that already guard engine calls
with ``except ValueError`` keep working.
"""

import math
import numbers


class CrossForgeError(ValueError):
    """Base class for all engine errors."""


class ConfigurationError(CrossForgeError):
    """An unrecognized catalog label or an inconsistent parameter set."""


class NumericDegeneracy(CrossForgeError):
    """A numeric input that would make a formula divide by zero or go non-finite."""


def require_positive(name: str, value: float) -> float:
    """
    Return ``value`` as float if it is a finite, strictly positive number.

    Raises:
        NumericDegeneracy: for zero, negative, NaN, infinite or non-numeric input.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise NumericDegeneracy(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise NumericDegeneracy(f"{name} must be a finite positive number, got {value}")
    return value
