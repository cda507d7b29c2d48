"""Generated-value sweeps over every vector class for fixed_vector.

Each test runs over the named aliases plus a few 64-bit, unsigned and half
precision classes, with values drawn from a seeded numpy generator.
"""

import numpy as np
import pytest

from fixed_vector import (
    ArityError,
    BuilderOverflowError,
    BuilderUnderflowError,
    Vector2d,
    Vector2f,
    Vector2i,
    Vector3d,
    Vector3f,
    Vector3i,
    Vector4d,
    Vector4f,
    Vector4i,
    vector_type,
)

CLASSES = [
    Vector2d,
    Vector3d,
    Vector4d,
    Vector2f,
    Vector3f,
    Vector4f,
    Vector2i,
    Vector3i,
    Vector4i,
    vector_type(np.int64, 2),
    vector_type(np.int64, 4),
    vector_type(np.uint8, 3),
    vector_type(np.uint64, 2),
    vector_type(np.float16, 3),
    vector_type(np.int16, 5),
]

TRIALS = 20

sweep = pytest.mark.parametrize("cls", CLASSES, ids=lambda c: c.__name__)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def rng():
    return np.random.default_rng(20171)


def _draw(cls, rng, size=None):
    """Values exactly representable in ``cls.dtype``, as Python scalars."""
    n = cls.dimension if size is None else size
    if cls.dtype.kind == "f":
        return (rng.standard_normal(n) * 10).astype(cls.dtype).tolist()
    info = np.iinfo(cls.dtype)
    return rng.integers(
        info.min, info.max, size=n, dtype=cls.dtype, endpoint=True
    ).tolist()


def _reads(v):
    return [v[i].item() for i in range(len(v))]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


@sweep
def test_from_scalars_round_trip(cls, rng):
    for _ in range(TRIALS):
        values = _draw(cls, rng)
        assert _reads(cls(*values)) == values
        assert _reads(cls.from_scalars(*values)) == values


@sweep
def test_extreme_values_round_trip(cls):
    if cls.dtype.kind == "f":
        info = np.finfo(cls.dtype)
        lo, hi = float(info.min), float(info.max)
    else:
        info = np.iinfo(cls.dtype)
        lo, hi = int(info.min), int(info.max)
    values = [lo] + [hi] * (cls.dimension - 1)
    assert _reads(cls(*values)) == values


@sweep
def test_mixed_int_and_float_values(cls, rng):
    for _ in range(TRIALS):
        values = _draw(cls, rng)
        values[-1] = 0.5
        expected = list(values)
        expected[-1] = 0 if cls.dtype.kind in "iu" else 0.5
        assert _reads(cls(*values)) == expected


@sweep
def test_wrong_arity_rejected(cls, rng):
    values = _draw(cls, rng)
    with pytest.raises(ArityError, match=f"exactly {cls.dimension}"):
        cls(*values[:-1])
    with pytest.raises(ArityError, match=f"exactly {cls.dimension}"):
        cls(*values, values[0])


@sweep
def test_conversion_zero_fills(cls, rng):
    small = vector_type(cls.dtype, 2)(*_draw(cls, rng, size=2))
    v = cls(small)
    assert _reads(v) == _reads(small) + [0] * (cls.dimension - 2)


# ---------------------------------------------------------------------------
# Arithmetic
# ---------------------------------------------------------------------------


@sweep
def test_add_commutative(cls, rng):
    for _ in range(TRIALS):
        a = cls(*_draw(cls, rng))
        b = cls(*_draw(cls, rng))
        assert a + b == b + a
        assert type(a + b) is cls


@sweep
def test_dot_symmetric(cls, rng):
    for _ in range(TRIALS):
        a = cls(*_draw(cls, rng))
        b = cls(*_draw(cls, rng))
        assert a.dot(b) == b.dot(a)
        assert a.dot(b).dtype == cls.dtype


@sweep
def test_scalar_multiply_either_side(cls, rng):
    for _ in range(TRIALS):
        v = cls(*_draw(cls, rng))
        assert v * 3 == 3 * v
        assert type(v * 3) is cls


@sweep
def test_negation_leaves_operand(cls, rng):
    values = _draw(cls, rng)
    v = cls(*values)
    n = -v
    assert _reads(v) == values
    assert type(n) is cls


# ---------------------------------------------------------------------------
# Sequential builder
# ---------------------------------------------------------------------------


@sweep
def test_builder_exact_arity(cls, rng):
    for _ in range(TRIALS):
        values = _draw(cls, rng)
        assert cls.build(*values) == cls(*values)


@sweep
def test_builder_underflow(cls, rng):
    values = _draw(cls, rng)
    with pytest.raises(BuilderUnderflowError):
        cls.build(*values[:-1])


@sweep
def test_builder_overflow(cls, rng):
    values = _draw(cls, rng)
    b = cls.zeros().fill(values[0])
    for value in values[1:]:
        b << value
    with pytest.raises(BuilderOverflowError):
        b << values[0]
