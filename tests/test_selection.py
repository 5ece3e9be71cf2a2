from __future__ import annotations

import numpy as np
import pytest

from conftest import assert_partitioned, random_ints
from fast_selection.utils.validation import RankOutOfBoundsError


def test_finds_minimum(select):
    assert select([5, 2, 9, 1, 7, 3], 0) == 1


def test_finds_maximum(select):
    assert select([5, 2, 9, 1, 7, 3], 5) == 9


def test_finds_median_odd_length(select):
    assert select([5, 2, 9, 1, 7], 2) == 5


def test_finds_median_even_length(select):
    assert select([5, 2, 9, 1, 7, 3], 3) == 5


def test_single_element(select):
    assert select([42], 0) == 42


@pytest.mark.parametrize("k, expected", [(0, 2), (1, 5)])
def test_two_elements(select, k, expected):
    assert select([5, 2], k) == expected


@pytest.mark.parametrize("k, expected", [(0, 1), (1, 1), (4, 4), (8, 9)])
def test_duplicates(select, k, expected):
    assert select([3, 1, 4, 1, 5, 9, 2, 6, 5], k) == expected


@pytest.mark.parametrize("k", range(5))
def test_all_identical(select, k):
    assert select([7, 7, 7, 7, 7], k) == 7


def test_sorted_input(select):
    assert select([1, 2, 3, 4, 5, 6, 7, 8, 9], 4) == 5


def test_reverse_sorted_input(select):
    assert select([9, 8, 7, 6, 5, 4, 3, 2, 1], 4) == 5


def test_floats(select):
    assert select([3.14, 1.41, 2.71, 0.57], 1) == 1.41


def test_strings(select):
    assert select(["zebra", "apple", "mango", "banana"], 0) == "apple"
    assert select(["zebra", "apple", "mango", "banana"], 3) == "zebra"


def test_numpy_array(select):
    data = np.array([5, 2, 9, 1, 7, 3])
    assert select(data, 2) == 3


@pytest.mark.parametrize("k", [0, 100, 499, 500, 999])
def test_matches_sorted_on_random_data(select, k):
    data = random_ints(1000, 10000, seed=42)
    expected = sorted(data)[k]
    assert select(data, k) == expected


@pytest.mark.parametrize("n", [0, 1, 3])
@pytest.mark.parametrize("offset", [0, 1, 5])
def test_out_of_bounds_high(select, n, offset):
    with pytest.raises(RankOutOfBoundsError):
        select(list(range(n)), n + offset)


@pytest.mark.parametrize("k", [-1, -100])
def test_out_of_bounds_negative(select, k):
    with pytest.raises(RankOutOfBoundsError) as excinfo:
        select([1, 2, 3], k)
    assert excinfo.value.k == k
    assert excinfo.value.n == 3


def test_rank_error_is_index_error(select):
    with pytest.raises(IndexError):
        select([1, 2, 3], 3)


def test_rejects_non_integer_rank(select):
    with pytest.raises(TypeError):
        select([1, 2, 3], 1.0)
    with pytest.raises(TypeError):
        select([1, 2, 3], True)


def test_accepts_numpy_integer_rank(select):
    assert select([3, 1, 2], np.int64(1)) == 2


def test_rank_checked_before_touching_data(inplace_select):
    data = [5, 2, 9, 1, 7, 3]
    with pytest.raises(RankOutOfBoundsError):
        inplace_select(data, 6)
    assert data == [5, 2, 9, 1, 7, 3]


def test_copy_does_not_mutate(copy_select):
    data = [5, 2, 9, 1, 7, 3]
    assert copy_select(data, 2) == 3
    assert data == [5, 2, 9, 1, 7, 3]


def test_copy_does_not_mutate_numpy(copy_select):
    data = np.array([5, 2, 9, 1, 7, 3])
    copy_select(data, 2)
    np.testing.assert_array_equal(data, [5, 2, 9, 1, 7, 3])


def test_copy_accepts_tuple(copy_select):
    assert copy_select((5, 2, 9), 1) == 5


def test_inplace_modifies(inplace_select):
    data = [5, 2, 9, 1, 7, 3]
    result = inplace_select(data, 2)
    assert result == 3
    assert data != [5, 2, 9, 1, 7, 3]
    assert data[2] == 3
    assert sorted(data) == [1, 2, 3, 5, 7, 9]


def test_partition_invariant(inplace_select):
    data = [5, 2, 9, 1, 7, 3, 8, 4, 6]
    result = inplace_select(data, 4)
    assert data[4] == result == 5
    assert_partitioned(data, 4)


@pytest.mark.parametrize("k", [0, 1, 333, 700, 1499])
def test_partition_invariant_with_duplicates(inplace_select, k):
    data = random_ints(1500, 20, seed=k)
    expected = sorted(data)
    result = inplace_select(data, k)
    assert result == expected[k]
    assert_partitioned(data, k)
    assert sorted(data) == expected


def test_partition_invariant_numpy(inplace_select):
    rng = np.random.RandomState(3)
    data = rng.randint(0, 1000, size=2000)
    expected = np.sort(data)
    result = inplace_select(data, 1234)
    assert result == expected[1234]
    assert_partitioned(data, 1234)
    np.testing.assert_array_equal(np.sort(data), expected)
