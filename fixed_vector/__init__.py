"""fixed-vector — fixed-dimension numeric vectors for geometry code.

Numpy-backed vectors of N scalars of one arithmetic type, with elementwise
arithmetic, cross-type conversion, lexicographic ordering and an arity-checked
sequential builder.

Public API::

    from fixed_vector import Vector3d, vector_type, comp_mult, SequentialBuilder
"""

from .errors import (
    ArityError,
    BuilderError,
    BuilderOverflowError,
    BuilderUnderflowError,
    DimensionError,
    IndexOutOfRangeError,
    ScalarTypeError,
    VectorError,
    VectorTypeError,
)
from .vector import FixedVector, comp_mult, vector_type
from .builder import SequentialBuilder
from .types import (
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

__version__ = "0.1.0"
__all__ = [
    "FixedVector",
    "vector_type",
    "comp_mult",
    "SequentialBuilder",
    "Vector2d",
    "Vector3d",
    "Vector4d",
    "Vector2f",
    "Vector3f",
    "Vector4f",
    "Vector2i",
    "Vector3i",
    "Vector4i",
    "VectorError",
    "VectorTypeError",
    "ScalarTypeError",
    "DimensionError",
    "ArityError",
    "IndexOutOfRangeError",
    "BuilderError",
    "BuilderOverflowError",
    "BuilderUnderflowError",
]
