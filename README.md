# pushswap

pushswap sorts a list of distinct integers with two stacks, `a` and `b`, and
a small set of operations. It prints each operation it performs to standard
output, one per line:

| Operation      | Effect                                     |
|----------------|--------------------------------------------|
| `sa`, `sb`     | swap the top two elements of a stack       |
| `pa`           | move the top of `b` onto `a`               |
| `pb`           | move the top of `a` onto `b`               |
| `ra`, `rb`     | rotate a stack up (top goes to the bottom) |
| `rra`, `rrb`   | rotate a stack down (bottom comes to top)  |

Before sorting, each number is replaced by its rank, which is the count of
numbers smaller than it. Two numbers are fixed with at most one swap. Three
numbers and four or five numbers are each handled by a short fixed strategy.
Longer lists are sorted by a binary radix sort on the ranks.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments, as one quoted argument with spaces
between them, or as a mix of both:

```
push-swap 3 2 1
push-swap "4 67 3 87 23"
push-swap 5 "1 4" 2 3
```

If the numbers are already in ascending order, nothing is printed and the
exit status is 0.

The command writes a message to standard error and exits with status 1 when:

- no arguments are given;
- an argument is empty or starts with a space;
- an argument holds anything other than digits, spaces, `+` and `-`;
- a `+` or `-` is followed by a space or ends the argument;
- a number is written with a sign in the middle, such as `1-2`;
- a number lies outside the signed 32-bit range, or is longer than 11
  characters;
- a number appears more than once.

## Library use

```python
from pushswap.cli import solve

operations = solve([3, 2, 1])   # ['ra', 'sa']
```

`solve` returns the list of operations that sorts the numbers, or an empty
list when they are already sorted. It raises `PushSwapError` on repeated
numbers. `main(argv=None)` runs the command with the given argument list,
or `sys.argv[1:]`, and returns the exit status.

The pieces it is built from:

- `pushswap.parse` checks and reads arguments: `validate_args`,
  `join_args`, `parse_int`, `parse_numbers`, `check_duplicates` and
  `to_ranks`. All of them raise `PushSwapError` on bad input.
- `pushswap.stacks.Stacks` holds the two stacks, top first. `swap`,
  `push` and `rotate` perform the operations and add them to `moves`.
  When `out` is set to a text stream, each operation is also written to it.
  `is_sorted` reports whether `a` is in ascending order.
- `pushswap.sort` holds `sort_three`, `sort_four_to_five`, `radix_sort`
  and `sort_stacks`. `sort_stacks` picks the strategy that suits the size
  of stack `a`.

The package also includes small general helpers:

- `pushswap.chars`: ASCII classification and case conversion.
- `pushswap.strings`: string search, comparison, trimming and splitting.
- `pushswap.numbers`: `atoi` and `itoa` for signed 32-bit integers.
- `pushswap.memory`: filling, copying, searching and comparing byte
  buffers.
- `pushswap.output`: writing characters, strings and numbers to a stream.
- `pushswap.linked`: a singly linked list (`Node`, `LinkedList`).

## What it does not do

pushswap only produces a list of operations. It does not read a list of
operations and check whether that list sorts the numbers.

## Running the tests

```
pip install .[test]
pytest
```