# algonotes

Classic algorithms, data structures and text patterns written in plain
Python. The package uses only the standard library, and each function is
small enough to read in one sitting.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
```

## Modules

| Module | Contents |
| --- | --- |
| `algonotes.sorting` | `bubble_sort`, `heap_sort`, `insertion_sort`, `merge_sort`, `merge_sorted` |
| `algonotes.searching` | `binary_search`, `search_rotated`, `find_pivot`, `first_and_last`, `find_peak`, `allocate_books` |
| `algonotes.numbers` | `primes_up_to`, `is_palindrome_number`, `max_subarray_sum`, `power`, `factorial`, `fibonacci`, `divide`, `is_perfect`, `is_armstrong`, `is_prime`, `is_leap_year`, `grade`, `arithmetic_progression` (returns a `Progression` of terms and total), `even_numbers`, `odd_numbers`, `multiples` |
| `algonotes.rbtree` | `RedBlackTree` with `insert`, `delete`, `inorder`, `root`, membership, iteration and `len`; `Color` |
| `algonotes.graphs` | `dijkstra` on a weighted adjacency matrix, `topological_sort` on adjacency lists |
| `algonotes.matrix` | `is_orthogonal`, `spiral_order`, `multiply`, `largest_histogram_area`, `max_rectangle_area`, `corner_sum` |
| `algonotes.trees` | `TreeNode`, `build_tree` from level-order text, `inorder`, `sum_of_longest_path`, `is_same_tree` |
| `algonotes.linked_list` | `ListNode`, `from_values`, `to_values`, `length`, `attach`, `intersection_value` |
| `algonotes.patterns` | star and digit patterns as lists of lines, such as `star_pyramid`, `floyd_triangle`, `hollow_square`, `right_arrow` |
| `algonotes.figures` | `figure(number)` for the numbered figures 1 to 10, and `power_of_two_triangle` |
| `algonotes.exercises` | `first_capital`, `votes_report`, `exceeds_sum_of_others`, `fifth` |

## Examples

```python
from algonotes.sorting import merge_sort
from algonotes.searching import binary_search
from algonotes.graphs import dijkstra
from algonotes.rbtree import RedBlackTree
from algonotes.patterns import star_pyramid

merge_sort([5, 2, 9, 1])           # [1, 2, 5, 9]
binary_search([3, 4, 5, 6, 7], 4)  # 1
binary_search([3, 4, 5], 8)        # None

graph = [
    [0, 4, 0],
    [4, 0, 8],
    [0, 8, 0],
]
dijkstra(graph, 0)                 # [0, 4, 12]

tree = RedBlackTree([9, 7, 11, 6])
list(tree)                         # [6, 7, 9, 11]
tree.delete(9)                     # True
9 in tree                          # False
tree.root()                        # (value, Color) of the root, or None

print("\n".join(star_pyramid(3)))
#   *
#  ***
# *****
```

## Behaviour worth knowing

- The sorting functions return new lists and leave their input alone.
  `merge_sorted` takes the element from the second sequence first on ties.
- Searches return `None` when nothing is found. `find_pivot` and `find_peak`
  raise `ValueError` for an empty sequence; `allocate_books` raises
  `ValueError` when there are no students or fewer books than students.
- In `dijkstra` a weight of zero means there is no edge, and unreachable
  vertices get `math.inf`. A non-square matrix raises `ValueError` and an
  out-of-range source raises `IndexError`.
- `RedBlackTree` keeps duplicate values; `delete` removes one occurrence and
  reports whether it found one.
- `max_subarray_sum` never returns less than zero and raises `ValueError` on
  an empty input. `grade` raises `ValueError` for marks outside 0 to 100.
- `multiply` raises `ValueError` when the inner dimensions differ.
- Pattern and figure functions return lists of strings, one per line, so they
  can be printed, compared or joined as needed.

## What it does not do

This is a library only. It has no command-line program and does not read
from standard input or print anything; every routine takes its input as
arguments and returns its result.

## Running the tests

```
pytest
```