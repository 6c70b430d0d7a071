import copy

import pytest

from sparsegrb.index import Index


def test_components_by_dimension():
    idx = Index(3, 4)
    assert idx[0] == 3
    assert idx[1] == 4
    assert idx.first == 3
    assert idx.second == 4


def test_any_nonzero_dimension_gives_second():
    idx = Index(3, 4)
    assert idx[7] == 4


def test_built_from_tuple_equals_built_from_pair():
    assert Index((3, 4)) == Index(3, 4)
    assert Index([5, 6]) == Index(5, 6)


def test_built_from_index_copies():
    original = Index(1, 2)
    assert Index(original) == original


def test_compares_and_hashes_like_tuple():
    idx = Index(7, 8)
    assert idx == (7, 8)
    assert hash(idx) == hash((7, 8))
    table = {(7, 8): "value"}
    assert table[idx] == "value"


def test_unpacking_and_length():
    i, j = Index(9, 10)
    assert (i, j) == (9, 10)
    assert len(Index(9, 10)) == 2
    assert list(Index(9, 10)) == [9, 10]


def test_ordering_is_row_major():
    items = [Index(2, 0), Index(1, 5), Index(1, 2)]
    assert sorted(items) == [Index(1, 2), Index(1, 5), Index(2, 0)]
    assert Index(1, 2) < (1, 3)


def test_is_immutable():
    idx = Index(1, 2)
    with pytest.raises(AttributeError):
        idx.first = 5
    assert idx.first == 1


def test_wrong_number_of_components():
    with pytest.raises(ValueError):
        Index((1, 2, 3))


def test_non_integer_component_rejected():
    with pytest.raises(TypeError):
        Index(1.5, 2)


def test_single_integer_rejected():
    with pytest.raises(TypeError):
        Index(5)


def test_copy_round_trip():
    idx = Index(11, 12)
    assert copy.deepcopy(idx) == idx
    assert copy.copy(idx) == idx


def test_not_equal_to_unrelated_values():
    assert (Index(1, 2) == "x") is False
    assert (Index(1, 2) == (1, 2, 3)) is False