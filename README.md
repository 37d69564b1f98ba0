# algoshelf

A shelf of well-known algorithms, each written as a small, plain Python
function. It needs nothing outside the standard library and supports
Python 3.10 and later.

## Installing

```
pip install .
```

## What is on the shelf

| Module | Contents |
| --- | --- |
| `algoshelf.arrays` | `two_sum`, `two_sum_brute`, `three_sum`, `four_sum`, `max_profit`, `longest_consecutive`, `single_number`, `majority_element`, `majority_elements`, `rotate`, `remove_duplicates`, `missing_number`, `move_zeroes`, `next_permutation`, `max_consecutive_ones`, `max_subarray`, `subarray_sum`, `is_sorted_rotated`, `sort_colors` |
| `algoshelf.searching` | binary-search problems: `binary_search`, `search_insert`, `search_range`, `search_rotated`, `search_rotated_with_duplicates`, `find_min`, `find_peak_element`, `single_non_duplicate`, `find_kth_positive`, `my_sqrt`, `ship_within_days`, `smallest_divisor`, `min_days`, `split_array`, `min_eating_speed` |
| `algoshelf.matrix` | `spiral_order`, `set_zeroes`, `pascal_triangle` |
| `algoshelf.text` | `roman_to_int`, `is_palindrome`, `is_palindrome_number` |
| `algoshelf.grids` | `oranges_rotting`, `num_enclaves`, `shortest_path_binary_matrix`, `solve_surrounded`, `num_islands`, `update_matrix`, `flood_fill` |
| `algoshelf.graphs` | `can_finish`, `find_circle_num`, `is_bipartite` |
| `algoshelf.trees` | `TreeNode`, `build_tree`, traversals (`preorder`, `inorder`, `iter_inorder`, `postorder`, `level_order`, `zigzag_level_order`, `right_side_view`), `max_depth`, `is_balanced`, `is_same_tree`, `is_symmetric`, `max_path_sum`, `diameter`, `lowest_common_ancestor` |
| `algoshelf.bst` | `search_bst`, `insert_into_bst`, `delete_node`, `kth_smallest`, `is_valid_bst`, `bst_lowest_common_ancestor` |
| `algoshelf.linked_list` | `ListNode`, `build_list`, `list_values`, `add_two_numbers` |

## Things worth knowing

- `rotate`, `remove_duplicates`, `move_zeroes`, `next_permutation`,
  `sort_colors`, `set_zeroes` and `solve_surrounded` change the list you pass
  in and return `None` (`remove_duplicates` returns the number of values kept).
  `flood_fill` and `update_matrix` return new lists and leave their input alone.
- `TreeNode` and `ListNode` are dataclasses that compare by identity, so
  `lowest_common_ancestor` looks for the very nodes you pass it, while
  `bst_lowest_common_ancestor` goes by their values.
- `build_tree` takes values in level order, with `None` marking a missing
  child. `iter_inorder` yields the nodes themselves, without recursion.
- Functions that have no answer for empty input, such as `max_profit`,
  `max_subarray`, `majority_element`, `find_min`, `max_path_sum` and the grid
  searches, raise `ValueError`. `kth_smallest` returns `-1` for an empty tree
  and raises `IndexError` when `k` is out of range.
- Searches that can come up empty say so in their return value: `-1` from
  `binary_search`, `search_rotated`, `min_days`, `oranges_rotting` and
  `shortest_path_binary_matrix`; `[-1, -1]` from `search_range`; `[]` from
  `two_sum`.

## Examples

```python
from algoshelf.arrays import two_sum, three_sum
from algoshelf.searching import min_eating_speed
from algoshelf.trees import build_tree, level_order
from algoshelf.linked_list import build_list, list_values, add_two_numbers

two_sum([2, 7, 11, 15], 9)           # [0, 1]
three_sum([-1, 0, 1, 2, -1, -4])     # [[-1, -1, 2], [-1, 0, 1]]
min_eating_speed([3, 6, 7, 11], 8)   # 4

root = build_tree([3, 9, 20, None, None, 15, 7])
level_order(root)                    # [[3], [9, 20], [15, 7]]

total = add_two_numbers(build_list([2, 4, 3]), build_list([5, 6, 4]))
list_values(total)                   # [7, 0, 8]
```

## What it does not do

algoshelf is a library only: it has no command-line tool, and it reads and
writes no files. Call its functions from your own code.

## Running the tests

```
pip install .[test]
pytest
```