"""Decision-making dynamic programmes: house robbers and stock trading."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from math import inf


@dataclass
class TreeNode:
    """Binary tree node holding a house value."""

    val: int
    left: TreeNode | None = None
    right: TreeNode | None = None


def house_robber(values: Sequence[int]) -> int:
    """Most money from houses in a row when no two adjacent houses are robbed."""
    robbed, skipped = 0, 0
    for value in values:
        robbed, skipped = skipped + value, max(robbed, skipped)
    return max(robbed, skipped)


def house_robber_circular(values: Sequence[int]) -> int:
    """As :func:`house_robber`, but the first and last houses are neighbours."""
    houses = list(values)
    if len(houses) <= 1:
        return sum(houses)
    return max(house_robber(houses[:-1]), house_robber(houses[1:]))


def house_robber_tree(root: TreeNode | None) -> int:
    """Most money from a tree of houses when no parent and child are both robbed."""
    if root is None:
        return 0
    order: list[TreeNode] = []
    pending = [root]
    while pending:
        node = pending.pop()
        order.append(node)
        pending.extend(child for child in (node.left, node.right) if child is not None)
    # per node: (best when skipped, best when robbed)
    best: dict[int, tuple[int, int]] = {}
    for node in reversed(order):
        left_skip, left_rob = best[id(node.left)] if node.left else (0, 0)
        right_skip, right_rob = best[id(node.right)] if node.right else (0, 0)
        best[id(node)] = (
            max(left_skip, left_rob) + max(right_skip, right_rob),
            node.val + left_skip + right_skip,
        )
    return max(best[id(root)])


def max_profit_single(prices: Sequence[int]) -> int:
    """Best profit from at most one buy followed by one sell."""
    profit = 0
    cheapest = inf
    for price in prices:
        cheapest = min(cheapest, price)
        profit = max(profit, price - cheapest)
    return int(profit)


def max_profit_with_fee(prices: Sequence[int], fee: int) -> int:
    """Best profit from any number of trades, each paying ``fee`` when buying."""
    if fee < 0:
        raise ValueError("fee must not be negative")
    cash, holding = 0, -inf
    for price in prices:
        holding = max(holding, cash - price - fee)
        cash = max(cash, holding + price)
    return int(cash)


def max_profit_with_cooldown(prices: Sequence[int]) -> int:
    """Best profit from any number of trades when no buy may follow a sell the next day."""
    own, free, cooling = 0, 0, 0
    for price in reversed(prices):
        own, free, cooling = max(price + cooling, own), max(free, own - price), free
    return free


def max_profit_k_transactions(prices: Sequence[int], k: int) -> int:
    """Best profit from at most ``k`` buy-then-sell transactions."""
    if k < 0:
        raise ValueError("k must not be negative")
    buy = [-inf] * (k + 1)
    sell = [0] * (k + 1)
    for price in prices:
        for j in range(1, k + 1):
            buy[j] = max(buy[j], sell[j - 1] - price)
            sell[j] = max(sell[j], buy[j] + price)
    return int(sell[k])


def max_profit_two_transactions(prices: Sequence[int]) -> int:
    """Best profit from at most two buy-then-sell transactions."""
    return max_profit_k_transactions(prices, 2)