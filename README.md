# problemset

Small solutions to classic programming puzzles, grouped by the kind of data
they work on. Each solution is a plain function (or a small class) that takes
ordinary Python values and returns a result, so it is easy to call from your
own code or try out in a REPL. The package has no dependencies beyond the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `problemset.codechef` | Short contest problems: `max_runways`, `append_for_or`, `average_number`, `deepest_brackets`, `broken_telephone`, `chef_and_string`, `chef_and_digits`, `student_vote`, `count_maximums`, `gym_sessions`, `make_odd`, `maximum_score`, `superincreasing`, `weapon_value` |
| `problemset.codeforces` | `has_liar`, `first_cut_cost`, `worst_cut_cost`, `slice_to_survive` |
| `problemset.box_operations` | `BoxTree`, a lazy segment tree with range add, range floor-divide, range minimum and range sum; `run_queries`; `main` |
| `problemset.linked_lists` | `ListNode`, `add_two_numbers`, `merge_two_lists`, `merge_k_lists`, `sort_list` |
| `problemset.trees` | `TreeNode`, `inorder_traversal`, `level_order`, `min_depth` |
| `problemset.arrays` | `two_sum`, `three_sum`, `four_sum`, `max_frequency`, `find_median_sorted_arrays`, `merge_sorted`, `sort_colors`, `is_zero_array`, `max_removal`, `maximum_value_sum`, `missing_number` |
| `problemset.numbers` | `int_to_roman`, `is_palindrome`, `reverse_integer`, `my_atoi`, `triangle_type` |
| `problemset.text` | `find_words_containing`, `generate_parenthesis`, `longest_unequal_subsequence`, `can_construct`, `is_valid_parentheses`, `zigzag_convert` |
| `problemset.grids` | `game_of_life`, `color_the_grid`, `set_zeroes`, `solve_sudoku`, `is_valid_sudoku` |

Some functions work in place and return nothing: `merge_sorted`,
`sort_colors`, `game_of_life` and `set_zeroes`. `solve_sudoku` fills the board
in place and returns whether it found a solution. `merge_two_lists` and
`sort_list` relink the nodes they are given; `add_two_numbers` and
`merge_k_lists` build new lists.

## Examples

```python
from problemset.numbers import int_to_roman, my_atoi
from problemset.text import zigzag_convert, generate_parenthesis
from problemset.arrays import two_sum, three_sum
from problemset.linked_lists import ListNode, add_two_numbers
from problemset.trees import TreeNode, level_order

int_to_roman(1994)                   # "MCMXCIV"
my_atoi("   -42")                    # -42
zigzag_convert("PAYPALISHIRING", 3)  # "PAHNAPLSIIGYIR"
generate_parenthesis(2)              # ["(())", "()()"]

two_sum([2, 7, 11, 15], 9)           # [0, 1]
three_sum([-1, 0, 1, 2, -1, -4])     # [[-1, -1, 2], [-1, 0, 1]]

total = add_two_numbers(ListNode.from_values([2, 4, 3]),
                        ListNode.from_values([5, 6, 4]))
list(total)                          # [7, 0, 8]

root = TreeNode.from_level_order([3, 9, 20, None, None, 15, 7])
level_order(root)                    # [[3], [9, 20], [15, 7]]
```

Range queries on an array of boxes. Indices are zero-based and every range
includes both ends; a range outside the array raises `IndexError`.

```python
from problemset.box_operations import BoxTree

boxes = BoxTree([-5, -10, 0, 5])
boxes.add(0, 3, 2)       # boxes are now [-3, -8, 2, 7]
boxes.divide(0, 1, 3)    # floor division: [-1, -3, 2, 7]
boxes.minimum(0, 3)      # -3
boxes.total(0, 3)        # 5
```

`run_queries(values, queries)` runs a list of `(op, left, right[, x])`
tuples against a new `BoxTree` and returns the answers of the minimum and sum
queries in order.

## Command line

The `box-operations` command reads a box-operations problem from standard
input and prints the answer to every query that asks for one.

```
box-operations < input.txt
```

The input starts with `n q`, then the `n` initial box values, then `q`
queries, each one of:

- `1 l r c` – add `c` to every box from `l` to `r` inclusive
- `2 l r d` – replace every box from `l` to `r` with its value divided by `d`,
  rounded down
- `3 l r` – print the smallest value among boxes `l` to `r`
- `4 l r` – print the sum of boxes `l` to `r`

Box indices are zero-based.

## What the package does not do

Only the box operations have a command. The other solutions are functions to
call from Python; none of them reads test cases from standard input or writes
answers in a contest's output format.