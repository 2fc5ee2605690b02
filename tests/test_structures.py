import random

import pytest

from algobox.structures import Graph, SegmentTree, Stack, evaluate_postfix


def _sample_graph():
    g = Graph()
    for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        g.add_edge(v, w)
    return g


def test_dfs_sample_from_two():
    assert _sample_graph().dfs(2) == [2, 0, 1, 3]


def test_dfs_visits_each_reachable_once():
    order = _sample_graph().dfs(0)
    assert sorted(order) == [0, 1, 2, 3]
    assert order[0] == 0


def test_dfs_isolated_vertex():
    g = Graph()
    g.add_edge(1, 2)
    assert g.dfs(9) == [9]


def test_dfs_is_repeatable():
    g = _sample_graph()
    assert g.dfs(2) == [2, 0, 1, 3]
    assert g.dfs(2) == [2, 0, 1, 3]


def test_stack_lifo():
    s = Stack()
    for value in [1, 2, 3]:
        s.push(value)
    assert s.peek() == 3
    assert [s.pop(), s.pop(), s.pop()] == [3, 2, 1]
    assert s.is_empty()


def test_stack_empty_errors():
    s = Stack()
    with pytest.raises(IndexError):
        s.pop()
    with pytest.raises(IndexError):
        s.peek()


def test_segment_tree_matches_slices():
    rng = random.Random(7)
    values = [rng.randint(-50, 50) for _ in range(20)]
    tree = SegmentTree(values)
    for left in range(len(values)):
        for right in range(left, len(values)):
            assert tree.query(left, right) == min(values[left : right + 1])


def test_segment_tree_update():
    values = [5, 3, 8, 6, 1, 9]
    tree = SegmentTree(values)
    tree.update(4, 10)
    values[4] = 10
    assert tree.query(0, 5) == min(values)
    assert tree.query(3, 5) == min(values[3:6])


def test_segment_tree_bad_index():
    tree = SegmentTree([1, 2, 3])
    with pytest.raises(IndexError):
        tree.query(0, 3)
    with pytest.raises(IndexError):
        tree.update(-1, 0)
    with pytest.raises(ValueError):
        tree.query(2, 1)


def test_postfix_sample():
    assert evaluate_postfix("231*+9-") == -4


def test_postfix_single_operand():
    assert evaluate_postfix("7") == 7


def test_postfix_division():
    assert evaluate_postfix("92/") == 4


def test_postfix_truncates_toward_zero():
    assert evaluate_postfix("49-2/") == -evaluate_postfix("94-2/")


def test_postfix_commutative_addition():
    assert evaluate_postfix("34+") == evaluate_postfix("43+")


@pytest.mark.parametrize("expression", ["+", "1+", "12", "1 2+", ""])
def test_postfix_malformed(expression):
    with pytest.raises(ValueError):
        evaluate_postfix(expression)


def test_postfix_divide_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate_postfix("50/")