"""Knapsack-style dynamic programmes: 0/1 and unbounded knapsack, coin change and subset sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

PERFECT_SUM_MODULUS = 1_000_000_007


def _non_negative(name: str, values: Iterable[int]) -> list[int]:
    result = list(values)
    if any(value < 0 for value in result):
        raise ValueError(f"{name} must not be negative")
    return result


def _positive(name: str, values: Iterable[int]) -> list[int]:
    result = list(values)
    if any(value <= 0 for value in result):
        raise ValueError(f"{name} must be positive")
    return result


def _check_amount(name: str, amount: int) -> None:
    if amount < 0:
        raise ValueError(f"{name} must not be negative")


def _reachable_sums(values: Iterable[int], limit: int) -> int:
    """Bit set whose bit ``s`` is on when some subset of ``values`` sums to ``s <= limit``."""
    mask = (1 << (limit + 1)) - 1
    reachable = 1
    for value in values:
        reachable = (reachable | (reachable << value)) & mask
    return reachable


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items, each taken at most once, that fit in ``capacity``."""
    _check_amount("capacity", capacity)
    item_weights = _non_negative("weights", weights)
    item_values = list(values)
    if len(item_weights) != len(item_values):
        raise ValueError("weights and values must have the same length")
    best = [0] * (capacity + 1)
    for weight, value in zip(item_weights, item_values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def count_coin_ways(coins: Sequence[int], amount: int) -> int:
    """Number of multisets of ``coins`` (each usable any number of times) summing to ``amount``."""
    _check_amount("amount", amount)
    denominations = _positive("coins", coins)
    ways = [1] + [0] * amount
    for coin in denominations:
        for total in range(coin, amount + 1):
            ways[total] += ways[total - coin]
    return ways[amount]


def min_coins(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins summing to ``amount`` with unlimited supply, or None if it cannot be made."""
    _check_amount("amount", amount)
    denominations = _positive("coins", coins)
    unreachable = amount + 1
    best = [0] + [unreachable] * amount
    for total in range(1, amount + 1):
        for coin in denominations:
            if coin <= total:
                best[total] = min(best[total], best[total - coin] + 1)
    return None if best[amount] >= unreachable else best[amount]


def subset_sum_exists(values: Sequence[int], target: int) -> bool:
    """Whether some subset of ``values`` sums exactly to ``target``."""
    _check_amount("target", target)
    items = _non_negative("values", values)
    return bool(_reachable_sums(items, target) >> target & 1)


def equal_partition(values: Sequence[int]) -> bool:
    """Whether ``values`` can be split into two groups of equal sum."""
    items = _non_negative("values", values)
    total = sum(items)
    if total % 2:
        return False
    return subset_sum_exists(items, total // 2)


def _count_subsets(items: Sequence[int], target: int, modulus: int | None) -> int:
    counts = [1] + [0] * target
    for value in items:
        for total in range(target, value - 1, -1):
            counts[total] += counts[total - value]
            if modulus is not None:
                counts[total] %= modulus
    return counts[target]


def count_subsets(values: Sequence[int], target: int) -> int:
    """Number of subsets (by position) of ``values`` summing to ``target``."""
    _check_amount("target", target)
    return _count_subsets(_non_negative("values", values), target, None)


def perfect_sum(values: Sequence[int], target: int) -> int:
    """Number of subsets summing to ``target``, modulo 1,000,000,007."""
    _check_amount("target", target)
    return _count_subsets(_non_negative("values", values), target, PERFECT_SUM_MODULUS)


def min_subset_difference(values: Sequence[int]) -> int:
    """Smallest absolute difference between the sums of two groups splitting ``values``."""
    items = _non_negative("values", values)
    total = sum(items)
    reachable = _reachable_sums(items, total // 2)
    closest = reachable.bit_length() - 1
    return total - 2 * closest


def count_subsets_with_difference(values: Sequence[int], difference: int) -> int:
    """Ways to split ``values`` into two groups whose sums differ by ``difference``.

    The difference is first group minus second, so a negative one mirrors a positive one.
    """
    items = _non_negative("values", values)
    total = sum(items)
    gap = abs(difference)
    if gap > total or (total - gap) % 2:
        return 0
    return _count_subsets(items, (total - gap) // 2, None)


def target_sum_ways(nums: Sequence[int], target: int) -> int:
    """Ways to put ``+`` or ``-`` before each number so that the total is ``target``."""
    return count_subsets_with_difference(nums, target)


def rod_cutting(prices: Sequence[int]) -> int:
    """Best price for a rod of length ``len(prices)``, where a piece of length i sells for prices[i-1]."""
    piece_prices = list(prices)
    length = len(piece_prices)
    best = [0] * (length + 1)
    for piece, price in enumerate(piece_prices, 1):
        for rod in range(piece, length + 1):
            best[rod] = max(best[rod], best[rod - piece] + price)
    return best[length]


def last_stone_weight(stones: Sequence[int]) -> int:
    """Smallest possible weight left after smashing stones together pairwise."""
    return min_subset_difference(stones)