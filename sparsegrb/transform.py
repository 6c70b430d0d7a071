"""Lazy views that transform the values of a matrix or vector."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from sparsegrb.index import Index


class TransformMatrixView:
    """A matrix whose stored values are ``fn(entry)`` for each underlying entry.

    ``fn`` receives the whole ``(index, value)`` entry. Indices, shape and
    number of stored values are those of the underlying matrix.
    """

    def __init__(self, matrix: Any, fn: Callable[[Any], Any]) -> None:
        self._matrix = matrix
        self._fn = fn

    @property
    def base(self) -> Any:
        return self._matrix

    @property
    def shape(self) -> Index:
        return Index(self._matrix.shape)

    def __len__(self) -> int:
        return len(self._matrix)

    def __iter__(self) -> Iterator[tuple[Index, Any]]:
        for entry in self._matrix:
            index, _ = entry
            yield index, self._fn(entry)

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def find(self, key: Any) -> Optional[tuple[Index, Any]]:
        """Return the transformed entry at ``key``, or None if nothing is stored."""
        entry = self._matrix.find(key)
        if entry is None:
            return None
        index, _ = entry
        return index, self._fn(entry)

    def __repr__(self) -> str:
        return f"TransformMatrixView(shape={tuple(self.shape)})"


class TransformVectorView:
    """A vector whose stored values are ``fn(entry)`` for each underlying entry.

    ``fn`` receives the whole ``(index, value)`` entry.
    """

    def __init__(self, vector: Any, fn: Callable[[Any], Any]) -> None:
        self._vector = vector
        self._fn = fn

    @property
    def base(self) -> Any:
        return self._vector

    @property
    def shape(self) -> int:
        return self._vector.shape

    def __len__(self) -> int:
        return len(self._vector)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        for entry in self._vector:
            index, _ = entry
            yield index, self._fn(entry)

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def find(self, key: Any) -> Optional[tuple[int, Any]]:
        """Return the transformed entry at ``key``, or None if nothing is stored."""
        entry = self._vector.find(key)
        if entry is None:
            return None
        index, _ = entry
        return index, self._fn(entry)

    def __repr__(self) -> str:
        return f"TransformVectorView(shape={self.shape})"


def transform(container: Any,
              fn: Callable[[Any], Any]) -> TransformMatrixView | TransformVectorView:
    """Return a transform view suited to a vector or a matrix."""
    if isinstance(container.shape, int):
        return TransformVectorView(container, fn)
    return TransformMatrixView(container, fn)


def structure(container: Any) -> TransformMatrixView | TransformVectorView:
    """Return a view holding True at every stored index of ``container``."""
    return transform(container, lambda _entry: True)


def indices(container: Any) -> Iterator[Any]:
    """Yield the index of every stored entry."""
    return (index for index, _ in container)


def values(container: Any) -> Iterator[Any]:
    """Yield the value of every stored entry."""
    return (value for _, value in container)