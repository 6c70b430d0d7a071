"""Simple kernels over sparse matrices and timing helpers for them."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, MutableSequence, Sequence

from sparsegrb.index import Index

N_VECS = 32


def sumreduce(matrix: Iterable[Any]) -> Any:
    """Sum the stored values of a matrix or of ``(i, j, value)`` edge triples."""
    total = 0
    for entry in matrix:
        total += entry[2] if len(entry) == 3 else entry[1]
    return total


def spmm(a: Iterable[Any], b: Sequence[Any], c: MutableSequence[Any],
         n_vecs: int) -> MutableSequence[Any]:
    """Accumulate ``a`` times the row-major dense block ``b`` into ``c``.

    ``b`` holds ``n_vecs`` values per column of ``a`` and ``c`` holds
    ``n_vecs`` values per row. ``c`` is updated in place and returned.
    """
    for entry in a:
        if len(entry) == 3:
            i, k, value = entry
        else:
            index, value = entry
            i, k = Index(index)
        b_row = k * n_vecs
        c_row = i * n_vecs
        for j in range(n_vecs):
            c[c_row + j] += value * b[b_row + j]
    return c


def median(values: Iterable[Any]) -> Any:
    """Middle value, or the mean of the two middle values for an even count."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of an empty sequence")
    size = len(ordered)
    if size % 2 == 1:
        return ordered[size // 2]
    return (ordered[size // 2] + ordered[size // 2 - 1]) / 2


def mean(values: Iterable[Any]) -> Any:
    items = list(values)
    if not items:
        raise ValueError("mean of an empty sequence")
    return sum(items) / len(items)


@dataclass
class BenchmarkResult:
    """Per-trial durations in seconds and the result each trial produced."""

    durations: list[float] = field(default_factory=list)
    sums: list[Any] = field(default_factory=list)

    @property
    def median(self) -> float:
        return median(self.durations)

    @property
    def mean(self) -> float:
        return mean(self.durations)


def _run_trials(trial: Callable[[], Any], n_trials: int) -> BenchmarkResult:
    if n_trials < 1:
        raise ValueError("n_trials must be at least 1")
    result = BenchmarkResult()
    print("Beginning trials...")
    for _ in range(n_trials):
        begin = time.perf_counter()
        outcome = trial()
        end = time.perf_counter()
        result.sums.append(outcome)
        result.durations.append(end - begin)
    print(f"Median is {result.median * 1000:.6f}ms")
    print(f"Mean is {result.mean * 1000:.6f}ms")
    return result


def benchmark_sumreduce(matrix: Any, n_trials: int = 10) -> BenchmarkResult:
    """Time ``sumreduce(matrix)`` over several trials and print median and mean."""
    return _run_trials(lambda: sumreduce(matrix), n_trials)


def benchmark_spmm(a: Any, n_trials: int = 10) -> BenchmarkResult:
    """Time ``spmm`` of ``a`` against a block of ones, 32 vectors wide.

    The output block is not reset between trials, so each trial's sum adds
    to the one before.
    """
    rows, cols = Index(a.shape)
    b = [1.0] * (cols * N_VECS)
    c = [0.0] * (rows * N_VECS)

    def trial() -> float:
        spmm(a, b, c, N_VECS)
        return sum(c)

    return _run_trials(trial, n_trials)