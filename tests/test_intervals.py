import pytest

from algobox.intervals import (
    matrix_chain_order,
    max_coins,
    min_cost_to_cut_stick,
    palindrome_partition_cuts,
    super_egg_drop,
)


def test_matrix_chain_known_example():
    assert matrix_chain_order([40, 20, 30, 10, 30]) == 26000


def test_matrix_chain_two_matrices_costs_one_product():
    a, b, c = 2, 3, 4
    assert matrix_chain_order([a, b, c]) == a * b * c


def test_matrix_chain_single_matrix_is_free():
    assert matrix_chain_order([5, 7]) == 0


def test_matrix_chain_at_most_left_to_right_cost():
    dims = [10, 30, 5, 60, 8, 12]
    left_to_right = sum(dims[0] * dims[i] * dims[i + 1] for i in range(1, len(dims) - 1))
    assert matrix_chain_order(dims) <= left_to_right


def test_matrix_chain_reversal_symmetry():
    dims = [10, 30, 5, 60, 8, 12]
    assert matrix_chain_order(dims) == matrix_chain_order(dims[::-1])


@pytest.mark.parametrize("dims", [[], [5], [3, 0, 4]])
def test_matrix_chain_rejects_bad_dims(dims):
    with pytest.raises(ValueError):
        matrix_chain_order(dims)


def test_palindrome_cuts_known_example():
    assert palindrome_partition_cuts("aab") == 1


@pytest.mark.parametrize("text", ["", "a", "racecar", "abba"])
def test_palindrome_cuts_whole_palindrome(text):
    assert palindrome_partition_cuts(text) == 0


def test_palindrome_cuts_distinct_letters():
    text = "abcdef"
    assert palindrome_partition_cuts(text) == len(text) - 1


@pytest.mark.parametrize("text", ["ababbbabbababa", "noonabbad", "xyzzyx"])
def test_palindrome_cuts_bounded_by_length(text):
    cuts = palindrome_partition_cuts(text)
    assert 0 <= cuts <= len(text) - 1


def test_max_coins_known_example():
    assert max_coins([3, 1, 5, 8]) == 167


def test_max_coins_single_balloon():
    assert max_coins([9]) == 9


def test_max_coins_empty():
    assert max_coins([]) == 0


def test_max_coins_reversal_symmetry():
    nums = [2, 7, 1, 4, 3]
    assert max_coins(nums) == max_coins(nums[::-1])


def test_min_cost_cut_no_cuts():
    assert min_cost_to_cut_stick(9, []) == 0


def test_min_cost_single_cut_costs_length():
    assert min_cost_to_cut_stick(9, [4]) == 9


def test_min_cost_cut_order_irrelevant_and_input_untouched():
    cuts = [5, 1, 4, 3]
    assert min_cost_to_cut_stick(7, cuts) == min_cost_to_cut_stick(7, sorted(cuts))
    assert cuts == [5, 1, 4, 3]


def test_min_cost_cut_lower_bound():
    length = 20
    assert min_cost_to_cut_stick(length, [3, 8, 10, 15]) >= length * 2


@pytest.mark.parametrize("cuts", [[0], [7], [9]])
def test_min_cost_cut_rejects_outside_cuts(cuts):
    with pytest.raises(ValueError):
        min_cost_to_cut_stick(7, cuts)


def test_egg_drop_one_egg_scans_every_floor():
    assert super_egg_drop(1, 37) == 37


def test_egg_drop_no_floors():
    assert super_egg_drop(3, 0) == 0


def test_egg_drop_many_eggs_is_binary_search():
    floors = 1000
    assert super_egg_drop(20, floors) == floors.bit_length()


def test_egg_drop_more_eggs_never_worse():
    results = [super_egg_drop(e, 100) for e in range(1, 6)]
    assert results == sorted(results, reverse=True)


@pytest.mark.parametrize("eggs, floors", [(0, 5), (2, -1)])
def test_egg_drop_rejects_bad_arguments(eggs, floors):
    with pytest.raises(ValueError):
        super_egg_drop(eggs, floors)