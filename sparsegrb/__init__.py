"""Sparse matrices and vectors, views, operators, semiring multiplication and permutation."""

__version__ = "0.1.0"

__all__ = [
    "algorithms",
    "containers",
    "index",
    "kernels",
    "ops",
    "transform",
    "util",
    "views",
]