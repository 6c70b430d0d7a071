"""Two-dimensional (row, column) index used to address matrix entries."""

from __future__ import annotations

import operator
from typing import Any


class Index(tuple):
    """An immutable (row, column) pair that compares and hashes like a tuple.

    ``Index(i, j)`` builds an index from two integers, and ``Index(pair)``
    builds one from any two-element iterable, including another ``Index``.
    """

    __slots__ = ()

    def __new__(cls, first: Any, second: Any = None) -> "Index":
        if second is None:
            try:
                items = tuple(first)
            except TypeError:
                raise TypeError(
                    f"Index needs two integers or a pair, got {first!r}"
                ) from None
            if len(items) != 2:
                raise ValueError(
                    f"Index needs exactly two components, got {len(items)}"
                )
            first, second = items
        return super().__new__(cls, (operator.index(first), operator.index(second)))

    @property
    def first(self) -> int:
        return tuple.__getitem__(self, 0)

    @property
    def second(self) -> int:
        return tuple.__getitem__(self, 1)

    def __getitem__(self, dim: int) -> int:
        """Return the row for dimension 0 and the column otherwise."""
        return self.first if dim == 0 else self.second

    def __reduce__(self):
        return (Index, (self.first, self.second))

    def __repr__(self) -> str:
        return f"Index({self.first}, {self.second})"