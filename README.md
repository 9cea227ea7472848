# algocollection

A compact set of classic algorithms and data structures in plain Python,
with no third-party dependencies. Everything is a library function or class
that returns its result. Nothing prints to the terminal.

## Installation

```
pip install algocollection
```

## What is inside

### `algocollection.text`

- `highest_occurring_char(text)`: the character that occurs most often.
  When several characters tie, the one with the lowest code point wins. An
  empty string raises `ValueError`.
- `remove_consecutive_duplicates(text)`: collapses each run of the same
  character into a single occurrence, so `"aabccba"` becomes `"abcba"`.

### `algocollection.integers`

- `reverse_digits(n)`: the integer formed by the decimal digits of `n` in
  reverse order. The sign is kept, so `-123` becomes `-321`.
- `is_palindrome_number(n)`: whether `n` equals `reverse_digits(n)`.
- `decimal_to_binary(n)`: the binary digits of `n` as a string. Zero and
  negative numbers give an empty string.
- `is_power_of_two(n)`: whether `n` is a power of two.
- `fibonacci(count)`: a generator of the first `count` Fibonacci numbers,
  starting at 0.

### `algocollection.sorting`

- `selection_sort(items)`: a new list holding the items in ascending order.
  The input is left unchanged.
- `binary_search(items, key)`: an index of `key` in a sorted sequence, or
  `-1` when it is absent.
- `min_chocolate_difference(packets, students)`: gives one packet to each
  student so that the gap between the largest and the smallest packet handed
  out is as small as possible, and returns that gap. It returns `0` when
  there are no packets or no students. It raises `ValueError` when there are
  fewer packets than students.

### `algocollection.puzzles`

- `Move`: a frozen record with `disk`, `source` and `target`. Its string form
  reads `Move circle 1 from pole p to pole q`.
- `tower_of_hanoi(disks, source, target, auxiliary)`: yields the `Move`s
  that carry a tower of `disks` disks from `source` to `target`.
- `tug_of_war(values)`: splits the values into two lists whose sums are as
  close as possible. The first list holds `len(values) // 2` elements and the
  second holds the rest. Both keep the original order.

### `algocollection.linked_list`

`LinkedList(values=())` is a singly linked list. Positions are counted
from 1.

| Method | What it does |
| --- | --- |
| `append(value)` | adds at the end |
| `prepend(value)` | adds at the front |
| `add_after(position, value)` | inserts after the element at `position` (`IndexError` if there is no such element) |
| `insert_at(position, value)` | inserts so that the value ends up at `position`; the list must not be empty and `position` may be at most one past the end (`IndexError` otherwise) |
| `remove(value)` | removes the first equal element (`ValueError` if the list is empty or the value is absent) |
| `delete_at(position)` | removes the element at `position` and returns its value (`IndexError` if out of range) |
| `index(value)` | the position of the first equal element (`ValueError` if absent) |
| `reverse()` | reverses the list in place |

The list also supports `len()`, iteration and a readable `repr`.

### `algocollection.tree`

`TreeNode(val, left=None, right=None)` is a binary tree node.
`inorder(root)` yields the tree's values in in-order sequence.
`mirror(root)` returns a new tree with left and right swapped at every
node. The original tree is not modified.

## Example

```python
from algocollection.linked_list import LinkedList
from algocollection.puzzles import tower_of_hanoi
from algocollection.sorting import binary_search, selection_sort
from algocollection.tree import TreeNode, inorder, mirror

print(selection_sort([6, 12, 0, 18, 11, 99, 55, 45, 34, 2]))
print(binary_search([1, 2, 3, 4, 5], 4))  # 3

for move in tower_of_hanoi(3, "p", "q", "r"):
    print(move)

numbers = LinkedList([0, 1, 8, 0, 4, 10])
numbers.reverse()
print(list(numbers))  # [10, 4, 0, 8, 1, 0]

tree = TreeNode(5, TreeNode(3, TreeNode(2), TreeNode(4)), TreeNode(6))
print(list(inorder(mirror(tree))))  # [6, 5, 4, 3, 2]
```

## What it does not do

The package has no command-line programs. It does not read input from the
terminal and does not print results. You call the functions from your own
code and decide what to do with the values they return.

## Running the tests

```
pip install -e ".[test]"
pytest
```