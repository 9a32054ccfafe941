# algokit

A small library of classic algorithms and data structures, in plain Python
with no dependencies outside the standard library.

## Installation

```
pip install algokit
```

To run the test suite:

```
pip install "algokit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `bubble_sort`, `selection_sort`, `insertion_sort`, `merge_sort`, `quick_sort`, `heap_sort`, `intro_sort` |
| `algokit.distribution` | `counting_sort`, `pigeonhole_sort`, `radix_sort` |
| `algokit.searching` | `binary_search`, `largest_minimum_distance` |
| `algokit.backtracking` | `solve_n_queens`, `format_board`, `subsets_with_sum`, `solve_sudoku` |
| `algokit.dp` | `egg_drop`, `longest_increasing_subsequence`, `largest_square_of_ones`, `fibonacci`, `fibonacci_table` |
| `algokit.strings` | `SubstringIndex`, `rabin_karp`, `reverse_string`, `rotate_left`, `permutations` |
| `algokit.structures` | `Stack`, `DisjointSet`, `largest_histogram_area` |
| `algokit.parity` | `is_odd`, `describe_parity` |

## Sorting

Every sort takes an iterable and returns a new sorted list; the input is left
untouched.

```python
import random
from algokit.sorting import merge_sort, quick_sort, intro_sort
from algokit.distribution import counting_sort, pigeonhole_sort, radix_sort

merge_sort([5, 2, 9, 1])                    # [1, 2, 5, 9]
quick_sort([3, 1, 2], random.Random(0))     # [1, 2, 3]; rng is optional
intro_sort([3, 1, 23, -9, 233, 23, -313, 32, -9])
# [-313, -9, -9, 1, 3, 23, 23, 32, 233]

counting_sort([9, 2, 1, 4, 5, 3, 1, 2])     # [1, 1, 2, 2, 3, 4, 5, 9]
pigeonhole_sort([3, -1, 2])                 # [-1, 2, 3]
radix_sort([170, 45, 75, 90, 802, 24, 2, 66])
```

`counting_sort` and `radix_sort` accept only non-negative integers and raise
`ValueError` otherwise; `pigeonhole_sort` accepts any integers.

## Searching

```python
from algokit.searching import binary_search, largest_minimum_distance

binary_search([1, 3, 5, 7], 5)                 # 2
binary_search([1, 3, 5, 7], 4)                 # None
largest_minimum_distance([1, 2, 8, 4, 9], 3)   # 3
```

`largest_minimum_distance` gives the largest gap that can separate `count`
chosen positions; it raises `ValueError` unless `2 <= count <= len(positions)`.

## Backtracking

```python
from algokit.backtracking import (
    format_board, solve_n_queens, solve_sudoku, subsets_with_sum,
)

board = solve_n_queens(5)          # list of rows, 1 marks a queen; None if impossible
print(format_board(board))

subsets_with_sum([1, 2, 3], 3)     # [[3], [2, 1]]
```

`subsets_with_sum` lists each subset from the last chosen element back to the
first and needs non-negative values. `solve_sudoku` takes a 9x9 grid with 0
for empty cells and returns a solved copy, or `None` when there is no
solution; a grid of the wrong shape or with cells outside 0..9 raises
`ValueError`.

## Dynamic programming

```python
from algokit.dp import (
    egg_drop, fibonacci, fibonacci_table,
    largest_square_of_ones, longest_increasing_subsequence,
)

egg_drop(2, 10)                                  # 4
longest_increasing_subsequence([3, 10, 2, 1, 20])  # 3
largest_square_of_ones([[1, 1], [1, 1]])         # (2, (0, 0))
fibonacci(10)                                    # 55
fibonacci_table(5)                               # [0, 1, 1, 2, 3]
```

`largest_square_of_ones` returns the side of the largest all-ones square and
the `(row, col)` of its top-left corner, or `(0, None)` when there are no ones.

## Strings

```python
from algokit.strings import (
    SubstringIndex, permutations, rabin_karp, reverse_string, rotate_left,
)

rabin_karp("ab", "abcab")           # [0, 3]
reverse_string("hello")             # "olleh"
rotate_left("abcdef", 2)            # "cdefab"
list(permutations("abc"))           # all 6 arrangements

index = SubstringIndex(["apple", "banana", "grape"])
index.count("an", 1, 3)             # 1: words are numbered from 1
```

`permutations` is a generator; repeated characters give repeated results.

## Data structures

```python
from algokit.structures import DisjointSet, Stack, largest_histogram_area

stack = Stack()
stack.push(1)
stack.push(2)
stack.peek()                         # 2
stack.pop()                          # 2; IndexError when empty
len(stack)                           # 1

sets = DisjointSet(5)                # items 0..4
sets.union(1, 2)
sets.find(1) == sets.find(2)         # True

largest_histogram_area([2, 1, 4, 5, 1, 3, 3])   # 8
```

## Parity

```python
from algokit.parity import describe_parity, is_odd

is_odd(7)               # True
describe_parity(4)      # "4 is EVEN"
```

## What it does not do

algokit is a library only. It has no command-line program and does not read
input or print results; call the functions from your own code.