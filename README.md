# leetkit

leetkit is a small library of standard solutions to interview-style problems.
It covers arrays, strings, linked lists, binary trees and graphs. It is pure
Python and has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `leetkit.structures`

- `ListNode(val, next=None)`: a singly linked list node. Iterating over a
  node yields its value and the values of every node after it.
- `TreeNode(val, left=None, right=None)`: a binary tree node.
- `build_list(values)` / `list_values(head)`: convert a Python list to a linked
  list and back. An empty list gives `None`.
- `build_tree(values)` / `tree_values(root)`: convert a level-order list, with
  `None` for a missing child, to a tree and back. `tree_values` drops trailing
  `None` entries.

### `leetkit.arrays`

`asteroid_collision`, `max_area`, `pivot_index` (returns -1 when there is no
pivot), `increasing_triplet`, `largest_altitude`, `find_max_average` (returns
0.0 when `k` is out of range), `longest_ones`, `longest_subarray`,
`max_operations`, `product_except_self`, `unique_occurrences`,
`find_difference` (distinct values, in first-seen order), `equal_pairs`,
`equal_pairs_hash`, `find_peak_element` (linear scan; returns 0 if no element
is strictly above its neighbours), `find_peak_element_binary`,
`min_eating_speed` (raises `ValueError` for no piles), and three ways to count
successful spell/potion pairs: `successful_pairs_brute_force`,
`successful_pairs_binary` and `successful_pairs_prefix_sum`.

### `leetkit.text`

- `longest_common_prefix(strs)`: returns `""` for no strings.
- `decode_string(s)`: expands `k[...]` groups. Raises `ValueError` on an
  unmatched `]`.
- `is_subsequence(s, t)`
- `max_vowels(s, k)`: counts lowercase vowels only.
- `remove_stars(s)`: raises `ValueError` when a `*` has nothing to remove.
- `reverse_vowels(s)`
- `reverse_words(s)`
- `compress(chars)`: returns the run-length compressed characters as a new
  list. For example, `list("aabccc")` becomes `["a", "2", "b", "c", "3"]`.
- `is_valid_word(word)`: checks that the word has at least 3 UTF-8 bytes,
  contains only letters and digits, and has at least one vowel and one
  consonant. Letters and digits are those Unicode classes as letters and
  decimal digits.
- `is_valid_word_ascii(word)`: the same check, but only ASCII letters and
  digits are accepted.

### `leetkit.linked`

- `delete_middle(head)`: removes the node at index `n // 2`. A single-node list
  gives `None`.
- `odd_even_list(head)`: groups the nodes at odd positions before those at even
  positions.
- `reverse_list(head)`
- `pair_sum(head)`: returns the largest twin sum without changing the list. An
  empty list gives 0.

### `leetkit.trees`

`right_side_view`, `delete_node` (binary search tree), `good_nodes`,
`leaf_sequence`, `leaf_similar`, `max_depth`, `max_level_sum` (the smallest
1-based level with the largest sum; 0 for an empty tree), `path_sum` (counts
downward paths that add up to the target) and `search_bst` (returns the
matching subtree or `None`).

### `leetkit.graphs`

`can_visit_all_rooms` (breadth-first) and `can_visit_all_rooms_dfs`
(depth-first). Both raise `ValueError` when `rooms` is empty.

## Examples

```python
from leetkit.arrays import asteroid_collision, product_except_self
from leetkit.text import decode_string, reverse_words
from leetkit.structures import build_list, list_values, build_tree
from leetkit.linked import reverse_list
from leetkit.trees import right_side_view
from leetkit.graphs import can_visit_all_rooms

asteroid_collision([5, 10, -5])          # [5, 10]
product_except_self([1, 2, 3, 4])        # [24, 12, 8, 6]
decode_string("3[a2[c]]")                # "accaccacc"
reverse_words("  the sky   is blue ")    # "blue is sky the"

head = reverse_list(build_list([1, 2, 3]))
list_values(head)                        # [3, 2, 1]

root = build_tree([1, 2, 3, None, 5, None, 4])
right_side_view(root)                    # [1, 3, 4]

can_visit_all_rooms([[1], [2], [3], []]) # True
```

`delete_middle`, `odd_even_list`, `reverse_list` and `delete_node` change
their input in place and return the new head or root.

## What it does not do

leetkit is a library only. It has no command-line tool. Each problem is solved
by the functions listed above, and you call them from your own code.