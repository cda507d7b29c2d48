"""Unit tests for fixed_vector.types and the error hierarchy."""

import numpy as np
import pytest

from fixed_vector import errors
from fixed_vector.types import (
    Vector2d,
    Vector2f,
    Vector2i,
    Vector3d,
    Vector3f,
    Vector3i,
    Vector4d,
    Vector4f,
    Vector4i,
)
from fixed_vector.vector import FixedVector, vector_type

ALIASES = [
    (Vector2d, np.float64, 2),
    (Vector3d, np.float64, 3),
    (Vector4d, np.float64, 4),
    (Vector2f, np.float32, 2),
    (Vector3f, np.float32, 3),
    (Vector4f, np.float32, 4),
    (Vector2i, np.int32, 2),
    (Vector3i, np.int32, 3),
    (Vector4i, np.int32, 4),
]


# ---------------------------------------------------------------------------
# Aliases
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("cls, scalar, dim", ALIASES)
def test_alias_parameters(cls, scalar, dim):
    assert issubclass(cls, FixedVector)
    assert cls.dtype == np.dtype(scalar)
    assert cls.dimension == dim
    assert vector_type(scalar, dim) is cls


@pytest.mark.parametrize("cls, scalar, dim", ALIASES)
def test_alias_zeros(cls, scalar, dim):
    v = cls.zeros()
    assert len(v) == dim
    assert v.data().dtype == np.dtype(scalar)


def test_alias_names():
    assert Vector3d.__name__ == "Vector3d"
    assert Vector2i.__name__ == "Vector2i"
    assert repr(Vector3f(1, 2, 3)) == "Vector3f(1.0, 2.0, 3.0)"


@pytest.mark.parametrize("cls, scalar, dim", ALIASES)
def test_alias_accessors(cls, scalar, dim):
    v = cls.zeros()
    assert hasattr(v, "x") and hasattr(v, "y")
    assert hasattr(v, "z") == (dim >= 3)
    assert hasattr(v, "w") == (dim >= 4)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "exc, builtin",
    [
        (errors.VectorTypeError, TypeError),
        (errors.ScalarTypeError, TypeError),
        (errors.DimensionError, ValueError),
        (errors.ArityError, ValueError),
        (errors.IndexOutOfRangeError, IndexError),
        (errors.BuilderError, RuntimeError),
        (errors.BuilderOverflowError, errors.BuilderError),
        (errors.BuilderUnderflowError, errors.ArityError),
    ],
)
def test_error_hierarchy(exc, builtin):
    assert issubclass(exc, errors.VectorError)
    assert issubclass(exc, builtin)
