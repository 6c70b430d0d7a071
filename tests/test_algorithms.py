import pytest

from sparsegrb.algorithms import multiply, permute
from sparsegrb.containers import Matrix, Vector
from sparsegrb.ops import multiplies, plus, take_left
from sparsegrb.views import EmptyMatrixMask, FullMatrixMask, complement_view


def make_matrix(shape, entries):
    matrix = Matrix(shape)
    for key, value in entries.items():
        matrix[key] = value
    return matrix


def make_vector(shape, entries):
    vector = Vector(shape)
    for key, value in entries.items():
        vector[key] = value
    return vector


def identity(n):
    return make_matrix((n, n), {(i, i): 1 for i in range(n)})


@pytest.fixture
def sample():
    return make_matrix((3, 3), {(0, 0): 1, (0, 1): 2, (1, 1): 3, (2, 0): 4, (2, 2): 5})


def test_identity_times_vector_is_vector():
    x = make_vector(4, {0: 7, 2: 9})
    assert multiply(identity(4), x) == x


def test_matrix_vector_worked_example():
    a = make_matrix((2, 2), {(0, 0): 1, (0, 1): 2, (1, 1): 3})
    x = make_vector(2, {0: 1, 1: 1})
    assert list(multiply(a, x, plus, multiplies)) == [(0, 3), (1, 3)]


def test_matrix_vector_complement_mask_excludes_visited():
    x = make_vector(4, {0: 1, 1: 1, 2: 1, 3: 1})
    visited = make_vector(4, {0: 1, 3: 1})
    result = multiply(identity(4), x, mask=complement_view(visited))
    assert [i for i, _ in result] == [1, 2]


def test_matrix_vector_mask_with_false_value_blocks():
    x = make_vector(3, {0: 5, 1: 6})
    mask = make_vector(3, {0: True, 1: False})
    result = multiply(identity(3), x, mask=mask)
    assert list(result) == [(0, 5)]


def test_vector_times_matrix_selects_row(sample):
    e0 = make_vector(3, {0: 1})
    result = multiply(e0, sample)
    assert list(result) == [(j, v) for (i, j), v in sample if i == 0]


def test_matrix_times_identity_is_matrix(sample):
    assert multiply(sample, identity(3)) == sample
    assert multiply(identity(3), sample) == sample


def test_full_mask_matches_unmasked(sample):
    assert multiply(sample, sample, mask=FullMatrixMask()) == multiply(sample, sample)


def test_empty_mask_gives_empty_result(sample):
    result = multiply(sample, sample, mask=EmptyMatrixMask())
    assert result.empty()
    assert tuple(result.shape) == (3, 3)


def test_matrix_matrix_result_shape():
    a = make_matrix((2, 3), {(0, 1): 1})
    b = make_matrix((3, 4), {(1, 3): 2})
    result = multiply(a, b)
    assert tuple(result.shape) == (2, 4)
    assert result[(0, 3)] == 2


def test_dot_product():
    a = make_vector(4, {0: 2, 1: 3})
    b = make_vector(4, {1: 4, 3: 5})
    assert multiply(a, b) == 12


def test_dot_product_without_overlap_is_identity():
    a = make_vector(4, {0: 2})
    b = make_vector(4, {1: 4})
    assert multiply(a, b) == 0


def test_dot_product_counts_matches():
    ones = make_vector(5, {i: 1 for i in range(5)})
    assert multiply(ones, ones) == len(ones)


def test_dot_product_needs_monoid():
    a = make_vector(2, {0: 1})
    with pytest.raises(TypeError):
        multiply(a, a, take_left)


def test_dot_product_rejects_mask():
    a = make_vector(2, {0: 1})
    with pytest.raises(TypeError):
        multiply(a, a, mask=a)


def test_permute_identity_keeps_matrix(sample):
    assert permute(sample, [0, 1, 2]) == sample


def test_permute_reverse_twice_round_trips(sample):
    once = permute(sample, [2, 1, 0])
    assert once != sample
    assert permute(once, [2, 1, 0]) == sample


def test_permute_entries_follow_permutation(sample):
    p = [2, 0, 1]
    result = permute(sample, p)
    for (i, j), value in result:
        assert sample[(p[i], p[j])] == value
    assert len(result) == len(sample)


def test_permute_rows_only(sample):
    result = permute(sample, [1, 0, 2], [0, 1, 2])
    for j in range(3):
        assert result.find((0, j)) == (None if sample.find((1, j)) is None
                                       else ((0, j), sample[(1, j)]))


def test_permute_duplicate_entries_replicate(sample):
    result = permute(sample, [0, 0])
    assert tuple(result.shape) == (2, 2)
    assert result[(1, 1)] == sample[(0, 0)]
    assert result[(0, 1)] == sample[(0, 0)]


def test_permute_out_of_range_raises(sample):
    with pytest.raises(IndexError):
        permute(sample, [0, 5, 1])