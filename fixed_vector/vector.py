"""FixedVector — fixed-dimension numeric vector.

A vector class is parameterised by a numpy scalar type ``T`` and a dimension
``N >= 2``.  Each ``(T, N)`` pair maps to exactly one cached class::

    Vec3 = vector_type(np.float64, 3)      # or FixedVector[np.float64, 3]
    v = Vec3(1.0, 2.0, 3.0)

Public API
----------
vector_type()                 — create / look up the class for (T, N)
FixedVector
    .from_scalars()           — exactly N values, cast to T
    .from_vector()            — convert from (T2, N2 <= N), zero-filling the tail
    .zeros() / .build()       — zero vector / fresh vector via a sequential builder
    .assign()                 — in-place conversion, self-assignment is a no-op
    .add() .subtract() .scale() .componentwise_multiply()
    .dot() .length()
    .fill() / <<              — start a SequentialBuilder on this vector
    .data()                   — ndarray view for buffer-based APIs
comp_mult()                   — Hadamard product of two vectors
"""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Tuple

import numpy as np

from .errors import ArityError, DimensionError, IndexOutOfRangeError, VectorTypeError
from .scalars import (
    MIN_DIMENSION,
    cast_value,
    cast_values,
    is_scalar_value,
    promote,
    promote_scalar,
    scalar_dtype,
)

if TYPE_CHECKING:
    from .builder import SequentialBuilder

logger = logging.getLogger(__name__)

_TYPE_CACHE: Dict[Tuple[np.dtype, int], type] = {}


# ---------------------------------------------------------------------------
# Base class
# ---------------------------------------------------------------------------


class FixedVector:
    """N scalars of type T in one contiguous numpy array.

    The size never changes after construction.  Instances have value
    semantics: arithmetic always produces new vectors, and ``copy.copy``
    yields an independent one.

    Comparison
    ----------
    ``<``, ``<=``, ``>``, ``>=``, ``==`` and ``!=`` compare the elements
    lexicographically, element 0 first.  This is a total order for sortable
    scalars (useful for sorting and as map keys in ordered containers), and it
    is NOT a geometric ordering: ``(1, 100) < (2, 0)`` although the first
    vector is far longer.  Compare ``length()`` values for magnitudes.
    """

    __slots__ = ("_data",)

    dtype: Optional[np.dtype] = None
    dimension: Optional[int] = None

    # Keep numpy scalars and arrays from swallowing vectors in binary
    # operations; they defer to our reflected methods instead.
    __array_ufunc__ = None
    __hash__ = None  # mutable

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def __class_getitem__(cls, params: Any) -> type:
        if cls is not FixedVector:
            raise VectorTypeError(f"{cls.__name__} is already parameterised.")
        if not isinstance(params, tuple) or len(params) != 2:
            raise VectorTypeError(
                "FixedVector[T, N] takes a scalar type and a dimension."
            )
        return vector_type(*params)

    def __init__(self, *values: Any) -> None:
        cls = type(self)._concrete()
        if len(values) == 1 and isinstance(values[0], FixedVector):
            self._data = np.zeros(cls.dimension, dtype=cls.dtype)
            self.assign(values[0])
        else:
            self._data = cls._checked_array(values)

    @classmethod
    def _concrete(cls) -> type:
        if cls.dtype is None or cls.dimension is None:
            raise VectorTypeError(
                "FixedVector must be parameterised before use: "
                "vector_type(T, N) or FixedVector[T, N]."
            )
        return cls

    @classmethod
    def _checked_array(cls, values: Tuple[Any, ...]) -> np.ndarray:
        if len(values) != cls.dimension:
            raise ArityError(
                f"{cls.__name__} takes exactly {cls.dimension} values, "
                f"got {len(values)}."
            )
        return cast_values(values, cls.dtype)

    @classmethod
    def _wrap(cls, array: np.ndarray) -> "FixedVector":
        obj = cls.__new__(cls)
        obj._data = array
        return obj

    @classmethod
    def from_scalars(cls, *values: Any) -> "FixedVector":
        """Vector holding exactly ``N`` values, each cast to ``T``."""
        cls._concrete()
        return cls._wrap(cls._checked_array(values))

    @classmethod
    def from_vector(cls, other: "FixedVector") -> "FixedVector":
        """Convert ``other`` (dimension <= N) to this class; unset slots are zero."""
        return cls.zeros().assign(other)

    @classmethod
    def zeros(cls) -> "FixedVector":
        cls._concrete()
        return cls._wrap(np.zeros(cls.dimension, dtype=cls.dtype))

    @classmethod
    def build(cls, *values: Any) -> "FixedVector":
        """Fresh vector filled from scalars and sub-vectors, in order.

        ``Vector3d.build(Vector2d(1, 2), 3.0)`` gives ``(1, 2, 3)``.  The total
        number of scalars must be exactly ``N``.
        """
        from .builder import SequentialBuilder

        builder = SequentialBuilder(cls.zeros())
        for value in values:
            builder.append(value)
        return builder.finish()

    def assign(self, other: "FixedVector") -> "FixedVector":
        """Overwrite this vector with ``other`` converted to ``T``.

        ``other`` may have any scalar type and a dimension up to ``N``; the
        remaining slots are set to zero.  Assigning a vector to itself leaves
        it untouched.
        """
        if other is self:
            return self
        _require_vector(other)
        if other.dimension > self.dimension:
            raise DimensionError(
                f"Cannot convert a {other.dimension}-dimensional vector into "
                f"{type(self).__name__} (dimension {self.dimension})."
            )
        n = other.dimension
        self._data[:n] = other._data.astype(self.dtype)
        self._data[n:] = 0
        return self

    def __copy__(self) -> "FixedVector":
        return type(self)._wrap(self._data.copy())

    def __deepcopy__(self, memo: Dict[int, Any]) -> "FixedVector":
        return self.__copy__()

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _index(self, index: Any) -> int:
        try:
            i = operator.index(index)
        except TypeError:
            raise TypeError(
                f"vector indices must be integers, not {type(index).__name__}"
            ) from None
        if not 0 <= i < self.dimension:
            raise IndexOutOfRangeError(
                f"index {i} out of range for {type(self).__name__} "
                f"(valid: 0..{self.dimension - 1})"
            )
        return i

    def __getitem__(self, index: Any) -> np.generic:
        return self._data[self._index(index)]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[self._index(index)] = cast_value(value, self.dtype)

    def __len__(self) -> int:
        return self.dimension

    def size(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[np.generic]:
        return iter(self._data)

    def __reversed__(self) -> Iterator[np.generic]:
        return iter(self._data[::-1])

    def data(self, writable: bool = True) -> np.ndarray:
        """Flat ``(N,)`` ndarray view onto the storage.

        Writes through a writable view change the vector.  With
        ``writable=False`` the view is read-only.
        """
        view = self._data.view()
        if not writable:
            view.flags.writeable = False
        return view

    def tolist(self) -> List[Any]:
        return self._data.tolist()

    def __array__(self, dtype: Any = None, copy: Optional[bool] = None) -> np.ndarray:
        if copy is False:
            raise ValueError(
                "FixedVector storage is shared only through data(), "
                "not via np.asarray(..., copy=False)."
            )
        return np.array(self._data, dtype=dtype, copy=True)

    @property
    def x(self) -> np.generic:
        return self._data[0]

    @x.setter
    def x(self, value: Any) -> None:
        self[0] = value

    @property
    def y(self) -> np.generic:
        return self._data[1]

    @y.setter
    def y(self, value: Any) -> None:
        self[1] = value

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for v in self.tolist())
        return f"{type(self).__name__}({values})"

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> Any:
        if not isinstance(other, FixedVector):
            return NotImplemented
        if other.dimension != self.dimension:
            return False
        return self.tolist() == other.tolist()

    def __ne__(self, other: Any) -> Any:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def _ordered(self, other: Any) -> Optional[Tuple[List[Any], List[Any]]]:
        if not isinstance(other, FixedVector):
            return None
        self._require_dimension(other)
        return self.tolist(), other.tolist()

    def __lt__(self, other: Any) -> Any:
        pair = self._ordered(other)
        return NotImplemented if pair is None else pair[0] < pair[1]

    def __le__(self, other: Any) -> Any:
        pair = self._ordered(other)
        return NotImplemented if pair is None else pair[0] <= pair[1]

    def __gt__(self, other: Any) -> Any:
        pair = self._ordered(other)
        return NotImplemented if pair is None else pair[0] > pair[1]

    def __ge__(self, other: Any) -> Any:
        pair = self._ordered(other)
        return NotImplemented if pair is None else pair[0] >= pair[1]

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _require_dimension(self, other: "FixedVector") -> None:
        if other.dimension != self.dimension:
            raise DimensionError(
                f"Dimension mismatch: {type(self).__name__} has "
                f"{self.dimension} elements, {type(other).__name__} has "
                f"{other.dimension}."
            )

    def _elementwise(self, other: "FixedVector", ufunc: np.ufunc) -> "FixedVector":
        self._require_dimension(other)
        dtype = promote(self.dtype, other.dtype)
        result = ufunc(self._data.astype(dtype), other._data.astype(dtype))
        return vector_type(dtype, self.dimension)._wrap(result)

    def add(self, other: "FixedVector") -> "FixedVector":
        return self._elementwise(_require_vector(other), np.add)

    def subtract(self, other: "FixedVector") -> "FixedVector":
        return self._elementwise(_require_vector(other), np.subtract)

    def componentwise_multiply(self, other: "FixedVector") -> "FixedVector":
        """Hadamard product; see ``scale`` for multiplication by a scalar."""
        return self._elementwise(_require_vector(other), np.multiply)

    def scale(self, scalar: Any) -> "FixedVector":
        """Multiply every element by ``scalar``."""
        dtype = promote_scalar(self.dtype, scalar)
        result = self._data.astype(dtype) * cast_value(scalar, dtype)
        return vector_type(dtype, self.dimension)._wrap(result)

    def __add__(self, other: Any) -> Any:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return self._elementwise(other, np.add)

    def __sub__(self, other: Any) -> Any:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return self._elementwise(other, np.subtract)

    def __mul__(self, other: Any) -> Any:
        # vector * vector stays undefined; use comp_mult() or dot()
        if not is_scalar_value(other):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __neg__(self) -> "FixedVector":
        return type(self)._wrap(np.negative(self._data))

    def __iadd__(self, other: Any) -> Any:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return self.assign(self._elementwise(other, np.add))

    def __isub__(self, other: Any) -> Any:
        if not isinstance(other, FixedVector):
            return NotImplemented
        return self.assign(self._elementwise(other, np.subtract))

    def __imul__(self, other: Any) -> Any:
        if not is_scalar_value(other):
            return NotImplemented
        return self.assign(self.scale(other))

    def dot(self, other: "FixedVector") -> np.generic:
        """Inner product, accumulated from a zero of the common scalar type."""
        self._require_dimension(_require_vector(other))
        dtype = promote(self.dtype, other.dtype)
        products = self._data.astype(dtype) * other._data.astype(dtype)
        return dtype.type(products.sum(initial=dtype.type(0), dtype=dtype))

    def length(self) -> np.generic:
        """``sqrt(dot(self))`` in ``T``; integer vectors truncate the result."""
        return self.dtype.type(np.sqrt(self.dot(self)))

    # ------------------------------------------------------------------
    # Sequential builder
    # ------------------------------------------------------------------

    def fill(self, first: Any) -> "SequentialBuilder":
        """Start filling this vector in place, beginning with ``first``.

        Returns the builder; call ``finish()`` on it (or use it as a context
        manager) once all ``N`` values have been appended.
        """
        from .builder import SequentialBuilder

        return SequentialBuilder(self).append(first)

    def __lshift__(self, first: Any) -> "SequentialBuilder":
        return self.fill(first)


# ---------------------------------------------------------------------------
# Dimension-gated accessors
# ---------------------------------------------------------------------------


class _ZAccessor:
    __slots__ = ()

    @property
    def z(self) -> np.generic:
        return self._data[2]

    @z.setter
    def z(self, value: Any) -> None:
        self[2] = value


class _WAccessor:
    __slots__ = ()

    @property
    def w(self) -> np.generic:
        return self._data[3]

    @w.setter
    def w(self, value: Any) -> None:
        self[3] = value


# ---------------------------------------------------------------------------
# Factory and free functions
# ---------------------------------------------------------------------------


def _check_dimension(dimension: Any) -> int:
    try:
        n = operator.index(dimension)
    except TypeError:
        raise DimensionError(
            f"Vector dimension must be an integer, got {dimension!r}."
        ) from None
    if n < MIN_DIMENSION:
        raise DimensionError(
            f"Dimension of vector must be {MIN_DIMENSION} or higher, got {n}."
        )
    return n


def _require_vector(value: Any) -> FixedVector:
    if not isinstance(value, FixedVector):
        raise VectorTypeError(
            f"Expected a FixedVector, got {type(value).__name__}."
        )
    return value


def vector_type(scalar_type: Any, dimension: Any, name: Optional[str] = None) -> type:
    """Return the vector class for ``(scalar_type, dimension)``.

    Parameters
    ----------
    scalar_type : anything ``numpy.dtype`` accepts; must be integral or floating.
    dimension   : number of elements, at least 2.
    name        : optional class name, e.g. ``"Vector3d"``; only used when the
                  class is first created, later calls never rename it.

    Classes are cached, so repeated calls return the same object.  ``z`` is
    only defined on classes with dimension >= 3 and ``w`` on dimension >= 4.
    """
    dtype = scalar_dtype(scalar_type)
    n = _check_dimension(dimension)
    key = (dtype, n)
    cls = _TYPE_CACHE.get(key)
    if cls is None:
        bases: Tuple[type, ...] = (FixedVector,)
        if n >= 3:
            bases += (_ZAccessor,)
        if n >= 4:
            bases += (_WAccessor,)
        cls_name = name or f"FixedVector[{dtype.name}, {n}]"
        cls = type(
            cls_name,
            bases,
            {"__slots__": (), "__module__": __name__, "dtype": dtype, "dimension": n},
        )
        _TYPE_CACHE[key] = cls
        logger.debug("created vector type %s (dtype=%s, dimension=%d)", cls_name, dtype, n)
    return cls


def comp_mult(a: FixedVector, b: FixedVector) -> FixedVector:
    """Componentwise (Hadamard) product of two same-dimension vectors."""
    return _require_vector(a).componentwise_multiply(b)
