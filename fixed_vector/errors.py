"""Exception hierarchy for fixed-vector.

Every error here is a contract violation by the caller: wrong arity, wrong
dimension, bad scalar type, out-of-range index or builder misuse.  None of
them is transient, so none is retried or swallowed inside the package.

Each class also derives from the closest builtin so that callers catching
``TypeError`` / ``ValueError`` / ``IndexError`` keep working.
"""

from __future__ import annotations


class VectorError(Exception):
    """Base class for every fixed-vector error."""


class VectorTypeError(VectorError, TypeError):
    """A vector class or vector operand was required and not supplied."""


class ScalarTypeError(VectorError, TypeError):
    """Scalar type ``T`` or a scalar value is not a real, non-boolean number."""


class DimensionError(VectorError, ValueError):
    """Dimension too small, mismatched, or larger than the target."""


class ArityError(VectorError, ValueError):
    """Wrong number of scalar values supplied for an N-dimensional vector."""


class IndexOutOfRangeError(VectorError, IndexError):
    """Element index outside ``[0, N)``."""


class BuilderError(VectorError, RuntimeError):
    """Sequential builder used after it was finished."""


class BuilderOverflowError(BuilderError):
    """More than N scalar values were appended to a builder."""


class BuilderUnderflowError(BuilderError, ArityError):
    """A builder was finished before all N slots were filled."""
