"""Sparse matrix and vector containers keyed by index."""

from __future__ import annotations

import enum
import operator
from typing import Any, Callable, Iterable, Iterator, Optional

from sparsegrb.index import Index


class Hint(enum.Enum):
    """Storage hint that chooses how a container keeps and orders entries."""

    SPARSE = "sparse"
    DENSE = "dense"
    ROW = "row"
    COLUMN = "column"
    COORDINATE = "coordinate"


def _hint_of(item: Any) -> Hint:
    if isinstance(item, Hint):
        return item
    hint = getattr(item, "hint", None)
    if isinstance(hint, Hint):
        return hint
    raise TypeError(f"expected a Hint or a container with a hint, got {item!r}")


def pick_ewise_hint(a: Any, b: Any) -> Hint:
    """Pick the hint for an element-wise result: dense if either side is dense."""
    if Hint.DENSE in (_hint_of(a), _hint_of(b)):
        return Hint.DENSE
    return Hint.SPARSE


def _sort_key(item: tuple[Any, Any]) -> Any:
    return item[0]


class Matrix:
    """A two-dimensional sparse matrix of explicitly stored values.

    Entries are ``(Index, value)`` pairs. With the sparse hint they are
    visited in row-major order; with any other hint in insertion order.
    """

    def __init__(self, shape: Any, hint: Hint = Hint.SPARSE) -> None:
        shape = Index(shape)
        if shape.first < 0 or shape.second < 0:
            raise ValueError(f"matrix shape must not be negative, got {shape!r}")
        self._shape = shape
        self._hint = _hint_of(hint)
        self._entries: dict[Index, Any] = {}

    @property
    def shape(self) -> Index:
        return self._shape

    @property
    def hint(self) -> Hint:
        return self._hint

    def _key(self, key: Any) -> Index:
        index = Index(key)
        if not (0 <= index.first < self._shape.first
                and 0 <= index.second < self._shape.second):
            raise IndexError(
                f"index {tuple(index)} outside matrix of shape {tuple(self._shape)}"
            )
        return index

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Index, Any]]:
        items = list(self._entries.items())
        if self._hint is Hint.SPARSE:
            items.sort(key=_sort_key)
        return iter(items)

    def __contains__(self, key: Any) -> bool:
        try:
            return Index(key) in self._entries
        except (TypeError, ValueError):
            return False

    def __getitem__(self, key: Any) -> Any:
        index = self._key(key)
        try:
            return self._entries[index]
        except KeyError:
            raise KeyError(tuple(index)) from None

    def __setitem__(self, key: Any, value: Any) -> None:
        self._entries[self._key(key)] = value

    def find(self, key: Any) -> Optional[tuple[Index, Any]]:
        """Return the stored ``(index, value)`` entry for ``key``, or None."""
        try:
            index = Index(key)
        except (TypeError, ValueError):
            return None
        if index in self._entries:
            return index, self._entries[index]
        return None

    def insert(self, key: Any, value: Any) -> bool:
        """Store ``value`` unless ``key`` is already present; return whether it was stored."""
        index = self._key(key)
        if index in self._entries:
            return False
        self._entries[index] = value
        return True

    def insert_or_assign(self, key: Any, value: Any) -> bool:
        """Store ``value`` at ``key``; return True if the entry is new."""
        index = self._key(key)
        inserted = index not in self._entries
        self._entries[index] = value
        return inserted

    def update(self, entries: Iterable[tuple[Any, Any]]) -> None:
        """Insert ``(key, value)`` pairs, keeping entries that already exist."""
        for key, value in entries:
            self.insert(key, value)

    def apply(self, fn: Callable[[Any], Any]) -> None:
        """Replace every stored value ``v`` with ``fn(v)``."""
        for index, value in self._entries.items():
            self._entries[index] = fn(value)

    def reshape(self, shape: Any) -> None:
        """Change the shape, dropping entries that fall outside it."""
        shape = Index(shape)
        if shape.first < 0 or shape.second < 0:
            raise ValueError(f"matrix shape must not be negative, got {shape!r}")
        self._entries = {
            index: value
            for index, value in self._entries.items()
            if index.first < shape.first and index.second < shape.second
        }
        self._shape = shape

    def clear(self) -> None:
        """Remove every stored entry, keeping the shape."""
        self._entries.clear()

    def empty(self) -> bool:
        return not self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self._shape == other._shape and self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (f"Matrix(shape={tuple(self._shape)}, hint={self._hint.value}, "
                f"nnz={len(self)})")


class Vector:
    """A one-dimensional sparse vector; entries are visited in index order."""

    def __init__(self, shape: int, hint: Hint = Hint.DENSE) -> None:
        shape = operator.index(shape)
        if shape < 0:
            raise ValueError(f"vector shape must not be negative, got {shape}")
        self._shape = shape
        self._hint = _hint_of(hint)
        self._entries: dict[int, Any] = {}

    @property
    def shape(self) -> int:
        return self._shape

    @property
    def hint(self) -> Hint:
        return self._hint

    def _key(self, key: Any) -> int:
        index = operator.index(key)
        if not 0 <= index < self._shape:
            raise IndexError(f"index {index} outside vector of shape {self._shape}")
        return index

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[int, Any]]:
        return iter(sorted(self._entries.items(), key=_sort_key))

    def __contains__(self, key: Any) -> bool:
        try:
            return operator.index(key) in self._entries
        except TypeError:
            return False

    def __getitem__(self, key: Any) -> Any:
        index = self._key(key)
        try:
            return self._entries[index]
        except KeyError:
            raise KeyError(index) from None

    def __setitem__(self, key: Any, value: Any) -> None:
        self._entries[self._key(key)] = value

    def find(self, key: Any) -> Optional[tuple[int, Any]]:
        """Return the stored ``(index, value)`` entry for ``key``, or None."""
        try:
            index = operator.index(key)
        except TypeError:
            return None
        if index in self._entries:
            return index, self._entries[index]
        return None

    def insert(self, key: Any, value: Any) -> bool:
        """Store ``value`` unless ``key`` is already present; return whether it was stored."""
        index = self._key(key)
        if index in self._entries:
            return False
        self._entries[index] = value
        return True

    def insert_or_assign(self, key: Any, value: Any) -> bool:
        """Store ``value`` at ``key``; return True if the entry is new."""
        index = self._key(key)
        inserted = index not in self._entries
        self._entries[index] = value
        return inserted

    def update(self, entries: Iterable[tuple[Any, Any]]) -> None:
        """Insert ``(key, value)`` pairs, keeping entries that already exist."""
        for key, value in entries:
            self.insert(key, value)

    def apply(self, fn: Callable[[Any], Any]) -> None:
        """Replace every stored value ``v`` with ``fn(v)``."""
        for index, value in self._entries.items():
            self._entries[index] = fn(value)

    def reshape(self, shape: int) -> None:
        """Change the shape, dropping entries that fall outside it."""
        shape = operator.index(shape)
        if shape < 0:
            raise ValueError(f"vector shape must not be negative, got {shape}")
        self._entries = {i: v for i, v in self._entries.items() if i < shape}
        self._shape = shape

    def clear(self) -> None:
        """Remove every stored entry, keeping the shape."""
        self._entries.clear()

    def empty(self) -> bool:
        return not self._entries

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._shape == other._shape and self._entries == other._entries

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector(shape={self._shape}, hint={self._hint.value}, nnz={len(self)})"