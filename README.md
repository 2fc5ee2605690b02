# algobox

Classic algorithms written as plain Python functions and a few small classes.
The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algobox.sorting` | `sort_colors` (in place), `insertion_sort`, `bubble_sort`, `selection_sort`, `heap_sort`, `merge_sort`, `quick_sort` (each returns a sorted copy) |
| `algobox.searching` | `binary_search`, `linear_search`, `jump_search`, `is_max_heap` |
| `algobox.arrays` | `max_subarray_sum`, `max_subarray_sum_divide`, `next_greater_elements` |
| `algobox.matrix` | `add_matrices`, `subtract_matrices`, `multiply_matrices`, `transpose`, `format_matrix` |
| `algobox.recursion` | `fibonacci`, `fibonacci_series`, `permutations`, `tower_of_hanoi`, `solve_n_queens`, `format_board` |
| `algobox.scheduling` | `Schedule`, `ScheduledProcess`, `shortest_job_first`, `first_come_first_serve`, `priority_schedule`, `round_robin` |
| `algobox.structures` | `Graph`, `Stack`, `SegmentTree`, `evaluate_postfix` |
| `algobox.catalan` | `binomial`, `catalan`, `catalan_numbers` |
| `algobox.knapsack` | `knapsack`, `count_coin_ways`, `min_coins`, `subset_sum_exists`, `equal_partition`, `count_subsets`, `perfect_sum`, `min_subset_difference`, `count_subsets_with_difference`, `target_sum_ways`, `rod_cutting`, `last_stone_weight` |
| `algobox.sequences` | `length_of_lis`, `longest_palindromic_substring_length`, `edit_distance`, `is_interleave`, `lcs_length`, `longest_common_subsequence`, `longest_common_substring`, `longest_palindromic_subsequence`, `longest_repeating_subsequence`, `min_deletions_to_palindrome`, `min_insertions_to_palindrome`, `shortest_common_supersequence_length`, `shortest_common_supersequence` |
| `algobox.intervals` | `matrix_chain_order`, `palindrome_partition_cuts`, `max_coins`, `min_cost_to_cut_stick`, `super_egg_drop` |
| `algobox.paths` | `min_cost_climbing_stairs`, `find_max_form`, `maximal_square`, `min_path_sum`, `min_falling_path_sum`, `mincost_tickets`, `min_steps`, `num_squares`, `minimum_total` |
| `algobox.bitmask` | `makesquare`, `max_score`, `min_assignment_cost`, `connect_two_groups`, `minimum_xor_sum`, `can_partition_k_subsets`, `travelling_salesman`, `count_shirt_assignments` |
| `algobox.decisions` | `TreeNode`, `house_robber`, `house_robber_circular`, `house_robber_tree`, `max_profit_single`, `max_profit_with_fee`, `max_profit_with_cooldown`, `max_profit_two_transactions`, `max_profit_k_transactions` |

## Examples

```python
from algobox.sorting import merge_sort
from algobox.knapsack import knapsack, min_coins
from algobox.sequences import longest_common_subsequence
from algobox.structures import evaluate_postfix

merge_sort([12, 11, 13, 5, 6, 7])                  # [5, 6, 7, 11, 12, 13]
knapsack(50, [10, 20, 30], [60, 100, 120])          # 220
min_coins([2], 3)                                   # None: the amount cannot be made
longest_common_subsequence("ABCDEF", "ABXYDVEYF")  # "ABDEF"
evaluate_postfix("231*+9-")                         # -4
```

Some functions return `None` where no answer exists: `binary_search`,
`linear_search` and `jump_search` when the target is absent, `min_coins` when
the amount cannot be made, and `solve_n_queens` when no placement exists.
`permutations` and `tower_of_hanoi` are generators; the latter yields moves as
`(disk, from_rod, to_rod)` tuples. Invalid input, such as matrices of the wrong
shape or negative counts, raises `ValueError`; popping or peeking an empty
`Stack` raises `IndexError`.

### Scheduling

Each scheduling function returns a `Schedule` whose `processes` are
`ScheduledProcess` records (`pid`, `burst_time`, `arrival_time`,
`waiting_time`, `turnaround_time`, `priority`, and the derived
`completion_time`). Shortest job first, priority and first come first serve
list processes in the order they run; round robin lists them in input order.

```python
from algobox.scheduling import shortest_job_first

schedule = shortest_job_first([6, 8, 7, 3])
[p.pid for p in schedule.processes]   # [4, 1, 3, 2]
schedule.average_waiting_time()       # 7.0
schedule.average_turnaround_time()    # 13.0
```

### Data structures

```python
from algobox.structures import Graph, SegmentTree

g = Graph()
for v, w in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
    g.add_edge(v, w)
g.dfs(2)                 # [2, 0, 1, 3]

tree = SegmentTree([5, 2, 8, 1])
tree.query(0, 2)         # 2
tree.update(1, 9)
tree.query(0, 2)         # 5
```

## What it does not do

algobox is a library only. It has no command-line tool and reads no input
from the terminal; results are returned, not printed. `format_matrix` and
`format_board` produce text for callers who want to display matrices and
boards themselves.