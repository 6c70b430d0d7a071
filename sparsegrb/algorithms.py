"""Sparse products over arbitrary semirings, and symmetric or general permutation."""

from __future__ import annotations

import operator
from collections import defaultdict
from typing import Any, Callable, Iterator, Optional, Sequence

from sparsegrb.containers import Hint, Matrix, Vector
from sparsegrb.index import Index
from sparsegrb.ops import multiplies, plus

BinaryFn = Callable[[Any, Any], Any]


def _is_vector(container: Any) -> bool:
    return isinstance(container.shape, int)


def _passes(mask: Any, key: Any) -> bool:
    """True if ``mask`` is absent or stores a true value at ``key``."""
    if mask is None:
        return True
    entry = mask.find(key)
    return entry is not None and bool(entry[1])


class _Transposed:
    """Read-only transpose of a matrix-like container."""

    def __init__(self, matrix: Any) -> None:
        self._matrix = matrix

    @property
    def shape(self) -> Index:
        rows, cols = self._matrix.shape
        return Index(cols, rows)

    def __len__(self) -> int:
        return len(self._matrix)

    def __iter__(self) -> Iterator[tuple[Index, Any]]:
        for index, value in self._matrix:
            i, j = index
            yield Index(j, i), value

    def find(self, key: Any) -> Optional[tuple[Index, Any]]:
        try:
            index = Index(key)
        except (TypeError, ValueError):
            return None
        entry = self._matrix.find(Index(index.second, index.first))
        if entry is None:
            return None
        return index, entry[1]


def _matrix_vector(a: Any, b: Any, reduce: BinaryFn, combine: BinaryFn,
                   mask: Any) -> Vector:
    rows, _ = a.shape
    result = Vector(rows)
    for a_index, a_value in a:
        i, k = a_index
        b_entry = b.find(k)
        if b_entry is None or not _passes(mask, i):
            continue
        combined = combine(a_value, b_entry[1])
        existing = result.find(i)
        if existing is None:
            result.insert(i, combined)
        else:
            result[i] = reduce(existing[1], combined)
    return result


def _matrix_matrix(a: Any, b: Any, reduce: BinaryFn, combine: BinaryFn,
                   mask: Any) -> Matrix:
    rows, _ = a.shape
    _, cols = b.shape
    b_rows: dict[int, list[tuple[int, Any]]] = defaultdict(list)
    for b_index, b_value in b:
        k, j = b_index
        b_rows[k].append((j, b_value))
    for row in b_rows.values():
        row.sort(key=operator.itemgetter(0))

    result = Matrix((rows, cols))
    for a_index, a_value in a:
        i, k = a_index
        for j, b_value in b_rows.get(k, ()):
            key = Index(i, j)
            if not _passes(mask, key):
                continue
            combined = combine(a_value, b_value)
            existing = result.find(key)
            if existing is None:
                result.insert(key, combined)
            else:
                result[key] = reduce(existing[1], combined)
    return result


def _dot(a: Any, b: Any, reduce: Any, combine: BinaryFn) -> Any:
    if not callable(getattr(reduce, "identity", None)):
        raise TypeError("a vector dot product needs a reduce operator with an identity")
    results = []
    for index, value in a:
        entry = b.find(index)
        if entry is not None:
            results.append(combine(value, entry[1]))
    kind = type(results[0]) if results else int
    total = reduce.identity(kind)
    for result in results:
        total = reduce(total, result)
    return total


def multiply(a: Any, b: Any, reduce: BinaryFn = plus,
             combine: BinaryFn = multiplies, mask: Any = None) -> Any:
    """Multiply matrices and vectors over the semiring ``(reduce, combine)``.

    Matrix times vector and vector times matrix give a vector, matrix times
    matrix gives a matrix, and vector times vector gives a scalar. A result
    entry is produced only where ``mask`` (if given) stores a true value.
    """
    a_vector = _is_vector(a)
    b_vector = _is_vector(b)
    if a_vector and b_vector:
        if mask is not None:
            raise TypeError("a vector dot product takes no mask")
        return _dot(a, b, reduce, combine)
    if a_vector:
        return _matrix_vector(_Transposed(b), a, reduce, combine, mask)
    if b_vector:
        return _matrix_vector(a, b, reduce, combine, mask)
    return _matrix_matrix(a, b, reduce, combine, mask)


def _projection(permutation: Sequence[Any], extent: int) -> dict[int, list[int]]:
    projection: dict[int, list[int]] = defaultdict(list)
    for position, source in enumerate(permutation):
        source = operator.index(source)
        if not 0 <= source < extent:
            raise IndexError(
                f"permutation entry {source} outside dimension of size {extent}"
            )
        projection[source].append(position)
    return projection


def permute(matrix: Any, permutation: Sequence[Any],
            column_permutation: Optional[Sequence[Any]] = None) -> Matrix:
    """Return ``o`` with ``o[i, j] = matrix[p[i], q[j]]``.

    With one permutation it is applied to both rows and columns; with two the
    first permutes rows and the second columns.
    """
    rows, cols = matrix.shape
    if column_permutation is None:
        row_proj = _projection(permutation, max(rows, cols))
        col_proj = row_proj
        shape = (len(permutation), len(permutation))
    else:
        row_proj = _projection(permutation, rows)
        col_proj = _projection(column_permutation, cols)
        shape = (len(permutation), len(column_permutation))

    hint = getattr(matrix, "hint", Hint.SPARSE)
    result = Matrix(shape, hint if isinstance(hint, Hint) else Hint.SPARSE)
    for index, value in matrix:
        i, j = index
        for new_i in row_proj.get(i, ()):
            for new_j in col_proj.get(j, ()):
                result.insert((new_i, new_j), value)
    return result