"""SequentialBuilder — chained, arity-checked filling of a vector.

Fills an existing vector one scalar at a time; sub-vectors splice their
elements into the stream.  Exactly ``N`` scalars must be supplied::

    v = Vector3d.zeros()
    with v.fill(1.0) as b:
        b << Vector2d(2.0, 3.0)

    (v << 1.0 << 2.0 << 3.0).finish()

The builder borrows its target.  The borrow ends when ``finish()`` is called
or the ``with`` block exits; the target must not be mutated by other threads
in between.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Optional, Type

from .errors import (
    BuilderError,
    BuilderOverflowError,
    BuilderUnderflowError,
    DimensionError,
    ScalarTypeError,
    VectorTypeError,
)
from .scalars import check_value
from .vector import FixedVector

logger = logging.getLogger(__name__)


class SequentialBuilder:
    """Fill ``target`` in index order and check the final count."""

    def __init__(self, target: FixedVector) -> None:
        if not isinstance(target, FixedVector):
            raise VectorTypeError(
                f"Builder target must be a FixedVector, got {type(target).__name__}."
            )
        self._target = target
        self._index = 0
        self._closed = False

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def target(self) -> FixedVector:
        return self._target

    @property
    def filled(self) -> int:
        """Number of scalars written so far."""
        return self._index

    @property
    def remaining(self) -> int:
        return self._target.dimension - self._index

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise BuilderError(
                f"Builder for {type(self._target).__name__} is already closed."
            )

    # ------------------------------------------------------------------
    # Appending
    # ------------------------------------------------------------------

    def append(self, value: Any) -> "SequentialBuilder":
        """Append a scalar, or every element of a vector, and return self."""
        self._check_open()
        if isinstance(value, FixedVector):
            if value.dimension > self._target.dimension:
                self._closed = True
                raise DimensionError(
                    f"Cannot splice a {value.dimension}-dimensional vector into "
                    f"{type(self._target).__name__} (dimension "
                    f"{self._target.dimension})."
                )
            for element in value:
                self._append_scalar(element)
        else:
            self._append_scalar(value)
        return self

    __lshift__ = append

    def _append_scalar(self, value: Any) -> None:
        n = self._target.dimension
        if self._index >= n:
            self._closed = True
            raise BuilderOverflowError(
                f"Too many values for {type(self._target).__name__}: "
                f"expected exactly {n}."
            )
        try:
            check_value(value)
        except ScalarTypeError:
            self._closed = True
            raise
        self._target[self._index] = value
        self._index += 1

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    def finish(self) -> FixedVector:
        """Verify that all ``N`` slots were filled and return the target."""
        self._check_open()
        self._closed = True
        n = self._target.dimension
        if self._index != n:
            raise BuilderUnderflowError(
                f"Too few values for {type(self._target).__name__}: "
                f"expected exactly {n}, got {self._index}."
            )
        logger.debug("filled %r", self._target)
        return self._target

    def __enter__(self) -> "SequentialBuilder":
        self._check_open()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Any,
    ) -> bool:
        if exc_type is None:
            if not self._closed:
                self.finish()
        else:
            self._closed = True
        return False

    def __del__(self) -> None:
        if getattr(self, "_closed", True):
            return
        msg = (
            f"SequentialBuilder for {type(self._target).__name__} was discarded "
            f"after {self._index} of {self._target.dimension} values without "
            "finish()"
        )
        logger.warning(msg)
        warnings.warn(msg, ResourceWarning, source=self)

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return (
            f"<SequentialBuilder {type(self._target).__name__} "
            f"{self._index}/{self._target.dimension} {state}>"
        )
