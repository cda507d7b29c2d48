"""Scalar types and promotion rules for fixed-vector.

Vectors store a single numpy dtype.  Only real, non-boolean arithmetic types
are accepted:

i  — signed integers   (int8 … int64)
u  — unsigned integers (uint8 … uint64)
f  — floating point    (float16 … float64)

Result types of mixed arithmetic follow a fixed table instead of the value
based promotion of Python or older numpy releases:

vector ⊕ vector — ``numpy.promote_types`` on the two dtypes
vector ⊗ scalar — numpy scalar: promote on its dtype
                  Python int:   keep the vector dtype
                  Python float: keep a float dtype, integers become float64
"""

from __future__ import annotations

import numbers
from typing import Any, Sequence

import numpy as np

from .errors import ScalarTypeError

SCALAR_KINDS: str = "iuf"
MIN_DIMENSION: int = 2

_FLOAT_DEFAULT = np.dtype(np.float64)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def scalar_dtype(scalar_type: Any) -> np.dtype:
    """Normalise ``scalar_type`` to a numpy dtype, rejecting non-arithmetic types."""
    if scalar_type is None:
        # np.dtype(None) silently means float64
        raise ScalarTypeError("scalar type must not be None")
    try:
        dtype = np.dtype(scalar_type)
    except TypeError as exc:
        raise ScalarTypeError(
            f"{scalar_type!r} is not a numpy scalar type"
        ) from exc
    if dtype.kind not in SCALAR_KINDS:
        raise ScalarTypeError(
            f"Invalid scalar type {dtype.name!r} for a vector. "
            "Expected a signed/unsigned integer or floating point type."
        )
    return dtype


def is_scalar_value(value: Any) -> bool:
    """True for real numbers that are not booleans."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, numbers.Real)


def check_value(value: Any) -> Any:
    if not is_scalar_value(value):
        raise ScalarTypeError(
            f"Value {value!r} of type {type(value).__name__} is not convertible "
            "to a vector scalar."
        )
    return value


def cast_value(value: Any, dtype: np.dtype) -> np.generic:
    """Convert one value to ``dtype`` with C cast semantics.

    Floats truncate toward zero when ``dtype`` is integral and out-of-range
    integers wrap, matching ``ndarray.astype``.  Python ints too large for
    any numpy integer raise ``ScalarTypeError``.
    """
    check_value(value)
    try:
        return np.asarray(value).astype(dtype)[()]
    except OverflowError as exc:
        raise ScalarTypeError(
            f"Value {value!r} cannot be represented as {dtype.name}."
        ) from exc


def cast_values(values: Sequence[Any], dtype: np.dtype) -> np.ndarray:
    """Convert a sequence of values to a fresh 1-D array of ``dtype``.

    Each value is cast on its own so that large integers never pass through
    a shared float64 intermediate.
    """
    return np.array([cast_value(v, dtype) for v in values], dtype=dtype)


# ---------------------------------------------------------------------------
# Promotion
# ---------------------------------------------------------------------------


def promote(a: np.dtype, b: np.dtype) -> np.dtype:
    """Result dtype of an elementwise operation between two vectors."""
    return np.promote_types(a, b)


def promote_scalar(dtype: np.dtype, value: Any) -> np.dtype:
    """Result dtype of a vector scaled by ``value``."""
    check_value(value)
    if isinstance(value, np.generic):
        return promote(dtype, value.dtype)
    if isinstance(value, numbers.Integral):
        return dtype
    if dtype.kind == "f":
        return dtype
    return _FLOAT_DEFAULT
