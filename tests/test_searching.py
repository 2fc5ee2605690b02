import heapq
import random

import pytest

from algobox.searching import binary_search, is_max_heap, jump_search, linear_search

SORTED = [1, 4, 9, 12, 17, 23, 31, 40, 52, 60]


@pytest.mark.parametrize("index", range(len(SORTED)))
def test_binary_search_finds_every_element(index):
    assert binary_search(SORTED, SORTED[index]) == index


@pytest.mark.parametrize("missing", [0, 5, 61, 24])
def test_binary_search_missing(missing):
    assert binary_search(SORTED, missing) is None


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_linear_search_from_start():
    data = [5, 1, 5, 8]
    assert linear_search(data, 5) == 0
    assert linear_search(data, 5, 1) == 2
    assert linear_search(data, 7) is None


def test_linear_search_rejects_negative_start():
    with pytest.raises(ValueError):
        linear_search([1, 2], 1, -1)


def test_jump_search_source_case_not_found():
    assert jump_search([1, 2, 3, 4, 5, 6, 7, 8, 9], 10, 2) is None


@pytest.mark.parametrize("jump", [1, 2, 3, 4, 7, 20, None])
def test_jump_search_finds_every_element(jump):
    for index, value in enumerate(SORTED):
        assert jump_search(SORTED, value, jump) == index


@pytest.mark.parametrize("jump", [1, 3, None])
@pytest.mark.parametrize("missing", [-5, 2, 50, 100])
def test_jump_search_missing(jump, missing):
    assert jump_search(SORTED, missing, jump) is None


def test_jump_search_empty():
    assert jump_search([], 1) is None


def test_jump_search_rejects_bad_jump():
    with pytest.raises(ValueError):
        jump_search(SORTED, 4, 0)


def test_is_max_heap_true_and_false():
    assert is_max_heap([90, 15, 10, 7, 12, 2])
    assert not is_max_heap([9, 15, 10])
    assert not is_max_heap([10, 9, 8, 7, 6, 5, 11])


def test_is_max_heap_trivial_inputs():
    assert is_max_heap([])
    assert is_max_heap([3])


@pytest.mark.parametrize("seed", range(5))
def test_heapified_lists_are_max_heaps(seed):
    rng = random.Random(seed)
    negated = [-rng.randint(0, 100) for _ in range(30)]
    heapq.heapify(negated)
    assert is_max_heap([-v for v in negated])


def test_descending_list_is_max_heap():
    assert is_max_heap(sorted([3, 8, 1, 9, 4], reverse=True))