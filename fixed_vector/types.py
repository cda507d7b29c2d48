"""Named vector types for fixed-vector.

Vector2d / Vector3d / Vector4d — float64 ("double")
Vector2f / Vector3f / Vector4f — float32 ("float")
Vector2i / Vector3i / Vector4i — int32   (C ``int``)

Each name is the cached ``vector_type`` class, so
``vector_type(np.float64, 3) is Vector3d``.
"""

from __future__ import annotations

import numpy as np

from .vector import vector_type

# ---------------------------------------------------------------------------
# double
# ---------------------------------------------------------------------------

Vector2d = vector_type(np.float64, 2, name="Vector2d")
Vector3d = vector_type(np.float64, 3, name="Vector3d")
Vector4d = vector_type(np.float64, 4, name="Vector4d")

# ---------------------------------------------------------------------------
# float
# ---------------------------------------------------------------------------

Vector2f = vector_type(np.float32, 2, name="Vector2f")
Vector3f = vector_type(np.float32, 3, name="Vector3f")
Vector4f = vector_type(np.float32, 4, name="Vector4f")

# ---------------------------------------------------------------------------
# int
# ---------------------------------------------------------------------------

Vector2i = vector_type(np.int32, 2, name="Vector2i")
Vector3i = vector_type(np.int32, 3, name="Vector3i")
Vector4i = vector_type(np.int32, 4, name="Vector4i")
