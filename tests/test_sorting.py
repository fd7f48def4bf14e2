import random

import pytest

from basicalgos.sorting import (
    bubble_sort,
    bucket_sort,
    exchange_sort,
    heap_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)


def _random_lists(seed):
    rng = random.Random(seed)
    return [[rng.randint(-50, 50) for _ in range(rng.randint(0, 40))] for _ in range(25)]


def test_reverse_five():
    data = [5, 4, 3, 2, 1]
    expected = [1, 2, 3, 4, 5]
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert exchange_sort(data) == expected


def test_documented_example():
    data = [10, 9, 7, 101, 23, 44, 12, 78, 34, 23]
    expected = [7, 9, 10, 12, 23, 23, 34, 44, 78, 101]
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert exchange_sort(data) == expected


def test_heap_example():
    data = [1, 3, 5, 4, 6, 13, 10, 9, 8, 15, 17]
    expected = [1, 3, 4, 5, 6, 8, 9, 10, 13, 15, 17]
    assert merge_sort(data) == expected
    assert quick_sort(data) == expected
    assert selection_sort(data) == expected
    assert bubble_sort(data) == expected
    assert heap_sort(data) == expected
    assert exchange_sort(data) == expected


def test_matches_builtin_on_random_lists():
    for data in _random_lists(1234):
        expected = sorted(data)
        assert merge_sort(data) == expected
        assert quick_sort(data) == expected
        assert selection_sort(data) == expected
        assert bubble_sort(data) == expected
        assert heap_sort(data) == expected
        assert exchange_sort(data) == expected


def test_empty_and_single():
    assert merge_sort([]) == []
    assert quick_sort([]) == []
    assert selection_sort([]) == []
    assert bubble_sort([]) == []
    assert heap_sort([]) == []
    assert exchange_sort([]) == []
    assert merge_sort([7]) == [7]
    assert quick_sort([7]) == [7]
    assert selection_sort([7]) == [7]
    assert bubble_sort([7]) == [7]
    assert heap_sort([7]) == [7]
    assert exchange_sort([7]) == [7]


def test_input_not_mutated():
    data = [3, 1, 2]
    assert merge_sort(data) == [1, 2, 3]
    assert quick_sort(data) == [1, 2, 3]
    assert selection_sort(data) == [1, 2, 3]
    assert bubble_sort(data) == [1, 2, 3]
    assert heap_sort(data) == [1, 2, 3]
    assert exchange_sort(data) == [1, 2, 3]
    assert data == [3, 1, 2]


def test_accepts_generators():
    source = (9, -1, 4)
    expected = [-1, 4, 9]
    assert merge_sort(x for x in source) == expected
    assert quick_sort(x for x in source) == expected
    assert selection_sort(x for x in source) == expected
    assert bubble_sort(x for x in source) == expected
    assert heap_sort(x for x in source) == expected
    assert exchange_sort(x for x in source) == expected


def test_bucket_sort_random_fractions():
    rng = random.Random(99)
    for _ in range(20):
        data = [rng.random() for _ in range(rng.randint(0, 30))]
        assert bucket_sort(data) == sorted(data)


def test_bucket_sort_small():
    assert bucket_sort([0.5, 0.25, 0.75, 0.0]) == [0.0, 0.25, 0.5, 0.75]


def test_bucket_sort_empty():
    assert bucket_sort([]) == []


@pytest.mark.parametrize("bad", [1.0, -0.1, 2.5])
def test_bucket_sort_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        bucket_sort([0.2, bad])