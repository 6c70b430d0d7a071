"""Read-only views: complements, full matrices and rectangular submatrices."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional

from sparsegrb.index import Index


def _stored_truthy(container: Any, key: Any) -> bool:
    entry = container.find(key)
    return entry is not None and bool(entry[1])


def _count_falsy(container: Any) -> int:
    return sum(1 for _, value in container if not bool(value))


class ComplementVectorView:
    """Boolean view of a vector holding True wherever the vector has no true value.

    An index appears in the view if the vector stores nothing there or stores
    a value that is false.
    """

    def __init__(self, vector: Any) -> None:
        self._vector = vector

    @property
    def shape(self) -> int:
        return self._vector.shape

    def __len__(self) -> int:
        return self.shape - len(self._vector) + _count_falsy(self._vector)

    def __iter__(self) -> Iterator[tuple[int, bool]]:
        for i in range(self.shape):
            if not _stored_truthy(self._vector, i):
                yield i, True

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def find(self, key: Any) -> Optional[tuple[int, bool]]:
        """Return ``(key, True)`` if ``key`` is in the complement, else None."""
        try:
            index = operator.index(key)
        except TypeError:
            return None
        if not 0 <= index < self.shape:
            return None
        if _stored_truthy(self._vector, index):
            return None
        return index, True

    def __repr__(self) -> str:
        return f"ComplementVectorView(shape={self.shape})"


class ComplementMatrixView:
    """Boolean view of a matrix holding True wherever the matrix has no true value.

    Entries are visited in row-major order.
    """

    def __init__(self, matrix: Any) -> None:
        self._matrix = matrix

    @property
    def shape(self) -> Index:
        return Index(self._matrix.shape)

    def __len__(self) -> int:
        rows, cols = self.shape
        return rows * cols - len(self._matrix) + _count_falsy(self._matrix)

    def __iter__(self) -> Iterator[tuple[Index, bool]]:
        rows, cols = self.shape
        for i in range(rows):
            for j in range(cols):
                index = Index(i, j)
                if not _stored_truthy(self._matrix, index):
                    yield index, True

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def find(self, key: Any) -> Optional[tuple[Index, bool]]:
        """Return ``(key, True)`` if ``key`` is in the complement, else None."""
        try:
            index = Index(key)
        except (TypeError, ValueError):
            return None
        rows, cols = self.shape
        if not (0 <= index.first < rows and 0 <= index.second < cols):
            return None
        if _stored_truthy(self._matrix, index):
            return None
        return index, True

    def __repr__(self) -> str:
        return f"ComplementMatrixView(shape={tuple(self.shape)})"


def complement_view(container: Any) -> ComplementVectorView | ComplementMatrixView:
    """Return the complement view suited to a vector or a matrix."""
    shape = container.shape
    if isinstance(shape, int):
        return ComplementVectorView(container)
    return ComplementMatrixView(container)


_UNBOUNDED = (sys.maxsize, sys.maxsize)


class FullMatrix:
    """A matrix that holds the same value at every index within its shape."""

    def __init__(self, shape: Any = None, value: Any = 0) -> None:
        self._shape = Index(_UNBOUNDED if shape is None else shape)
        if self._shape.first < 0 or self._shape.second < 0:
            raise ValueError(f"matrix shape must not be negative, got {self._shape!r}")
        self._value = value

    @property
    def shape(self) -> Index:
        return self._shape

    @property
    def value(self) -> Any:
        return self._value

    def _in_bounds(self, index: Index) -> bool:
        return (0 <= index.first < self._shape.first
                and 0 <= index.second < self._shape.second)

    def __len__(self) -> int:
        return self._shape.first * self._shape.second

    def __iter__(self) -> Iterator[tuple[Index, Any]]:
        for i in range(self._shape.first):
            for j in range(self._shape.second):
                yield Index(i, j), self._value

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def __getitem__(self, key: Any) -> Any:
        index = Index(key)
        if not self._in_bounds(index):
            raise IndexError(
                f"index {tuple(index)} outside matrix of shape {tuple(self._shape)}"
            )
        return self._value

    def find(self, key: Any) -> Optional[tuple[Index, Any]]:
        """Return ``(key, value)`` for an index inside the shape, else None."""
        try:
            index = Index(key)
        except (TypeError, ValueError):
            return None
        if not self._in_bounds(index):
            return None
        return index, self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(shape={tuple(self._shape)}, value={self._value!r})"


class FullMatrixMask(FullMatrix):
    """A mask that lets every index through."""

    def __init__(self, shape: Any = None) -> None:
        super().__init__(shape, True)


class EmptyMatrixMask(FullMatrix):
    """A mask that stores False everywhere, so it lets no index through."""

    def __init__(self, shape: Any = None) -> None:
        super().__init__(shape, False)


class SubmatrixView:
    """The entries of a matrix whose rows lie in ``[rows[0], rows[1])`` and
    columns in ``[columns[0], columns[1])``.

    Entries keep the indices they have in the underlying matrix.
    """

    def __init__(self, matrix: Any, rows: Any, columns: Any) -> None:
        self._matrix = matrix
        self._rows = Index(rows)
        self._columns = Index(columns)

    @property
    def shape(self) -> Index:
        return Index(self._rows.second - self._rows.first,
                     self._columns.second - self._columns.first)

    def _inside(self, index: Index) -> bool:
        return (self._rows.first <= index.first < self._rows.second
                and self._columns.first <= index.second < self._columns.second)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[tuple[Index, Any]]:
        for index, value in self._matrix:
            if self._inside(Index(index)):
                yield index, value

    def __contains__(self, key: Any) -> bool:
        return self.find(key) is not None

    def find(self, key: Any) -> Optional[tuple[Index, Any]]:
        """Return the underlying entry at ``key`` if it lies in the window, else None."""
        try:
            index = Index(key)
        except (TypeError, ValueError):
            return None
        if not self._inside(index):
            return None
        return self._matrix.find(index)

    def __repr__(self) -> str:
        return (f"SubmatrixView(rows={tuple(self._rows)}, "
                f"columns={tuple(self._columns)})")