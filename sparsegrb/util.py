"""Printing and random generation of matrices and vectors."""

from __future__ import annotations

import random
import sys
from typing import Any, Optional, TextIO

from sparsegrb.containers import Hint, Matrix, Vector
from sparsegrb.index import Index


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_container(container: Any, label: str = "") -> str:
    """Describe a matrix or vector and list its stored entries, one per line."""
    shape = container.shape
    is_vector = isinstance(shape, int)
    if is_vector:
        header = f"{shape} dimension vector with {len(container)} stored values"
    else:
        rows, cols = shape
        header = f"{rows} x {cols} matrix with {len(container)} stored values"
    if label:
        header += f' "{label}"'
    lines = [header]
    for index, value in container:
        if is_vector:
            lines.append(f"({index}): {_format_value(value)}")
        else:
            i, j = index
            lines.append(f"({i}, {j}): {_format_value(value)}")
    return "\n".join(lines) + "\n"


def print_container(container: Any, label: str = "",
                    file: Optional[TextIO] = None) -> None:
    """Write ``format_container(container, label)`` to ``file`` (standard output by default)."""
    out = sys.stdout if file is None else file
    out.write(format_container(container, label))


def _check_density(density: float) -> None:
    if density > 1.0 or density < 0:
        raise ValueError("generate_random: invalid density argument.")


def _random_value(rng: random.Random, kind: type) -> Any:
    if kind is float:
        return rng.random()
    return kind(rng.randint(0, 1))


def generate_random_matrix(shape: Any, density: float = 0.01, seed: Optional[int] = 0,
                           kind: type = float) -> Matrix:
    """Return a sparse matrix with ``int(density * m * n)`` randomly placed values.

    Floating-point values are uniform in [0, 1); integral values are 0 or 1.
    """
    _check_density(density)
    shape = Index(shape)
    rows, cols = shape
    nnz = int(density * rows * cols)
    rng = random.Random(seed)
    positions = sorted(rng.sample(range(rows * cols), nnz))
    matrix = Matrix(shape, Hint.SPARSE)
    matrix.update(
        (divmod(position, cols), _random_value(rng, kind)) for position in positions
    )
    return matrix


def generate_random_vector(shape: int, density: float = 0.01, seed: Optional[int] = None,
                           kind: type = float) -> Vector:
    """Return a vector with ``int(density * shape)`` randomly placed values.

    Without a seed the result differs from call to call.
    """
    _check_density(density)
    nnz = int(density * shape)
    rng = random.Random(seed)
    positions = sorted(rng.sample(range(shape), nnz))
    vector = Vector(shape, Hint.SPARSE)
    vector.update((position, _random_value(rng, kind)) for position in positions)
    return vector