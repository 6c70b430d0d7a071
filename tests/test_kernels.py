import pytest

from sparsegrb.containers import Matrix
from sparsegrb.kernels import (
    benchmark_spmm,
    benchmark_sumreduce,
    mean,
    median,
    spmm,
    sumreduce,
)


def make_matrix(shape, entries):
    matrix = Matrix(shape)
    for key, value in entries.items():
        matrix[key] = value
    return matrix


@pytest.fixture
def ones():
    return make_matrix((3, 4), {(0, 1): 1, (1, 0): 1, (2, 3): 1, (2, 2): 1})


def test_sumreduce_of_ones_counts_entries(ones):
    assert sumreduce(ones) == len(ones)


def test_sumreduce_edge_triples():
    edges = [(0, 1, 2.5), (1, 0, 4.0)]
    assert sumreduce(edges) == 2.5 + 4.0


def test_sumreduce_empty_matrix():
    assert sumreduce(Matrix((2, 2))) == 0


def test_spmm_identity_copies_block():
    n = 3
    n_vecs = 2
    a = make_matrix((n, n), {(i, i): 1 for i in range(n)})
    b = [float(x) for x in range(n * n_vecs)]
    c = [0.0] * (n * n_vecs)
    returned = spmm(a, b, c, n_vecs)
    assert returned is c
    assert c == b


def test_spmm_accumulates(ones):
    b = [1.0] * (4 * 2)
    c = [0.0] * (3 * 2)
    spmm(ones, b, c, 2)
    first = list(c)
    spmm(ones, b, c, 2)
    assert c == [2 * x for x in first]
    assert sum(first) == 2 * len(ones)


def test_spmm_edge_triples_match_matrix(ones):
    triples = [(i, j, v) for (i, j), v in ones]
    b = [float(x) for x in range(8)]
    assert spmm(triples, b, [0.0] * 6, 2) == spmm(ones, b, [0.0] * 6, 2)


def test_median_odd_and_even():
    assert median([3, 1, 2]) == 2
    assert median([4, 1, 3, 2]) == 2.5


def test_mean_value():
    assert mean([2, 4]) == 3


def test_median_and_mean_empty_raise():
    with pytest.raises(ValueError):
        median([])
    with pytest.raises(ValueError):
        mean([])


def test_benchmark_sumreduce(ones, capsys):
    result = benchmark_sumreduce(ones, 5)
    out = capsys.readouterr().out
    assert "Beginning trials..." in out
    assert "Median is" in out and "Mean is" in out
    assert len(result.durations) == 5
    assert result.sums == [len(ones)] * 5
    assert min(result.durations) <= result.median <= max(result.durations)


def test_benchmark_spmm_sums_grow_linearly(ones, capsys):
    result = benchmark_spmm(ones, 4)
    capsys.readouterr()
    first = result.sums[0]
    assert first > 0
    assert result.sums == [first * (k + 1) for k in range(4)]


def test_benchmark_needs_trials(ones):
    with pytest.raises(ValueError):
        benchmark_sumreduce(ones, 0)