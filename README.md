# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
set of stack operations, printing each operation it performs, one per line.

The operations are:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top element of `b` onto `a`, or of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | reverse rotate: the bottom element comes to the top |

Once all operations are applied, stack `a` holds the numbers in ascending
order, smallest on top, and `b` is empty.

Two or three numbers are sorted directly; longer inputs are sorted by pushing
values to `b` and back, each time choosing the value that needs the fewest
rotations to reach its place.

## Installation

```
pip install .
```

## Command line

The numbers may be given as separate arguments, or as one argument with the
numbers separated by spaces:

```
push-swap 3 2 1
push-swap "5 1 4 2 3"
```

The same command can be run as `python -m pushswap.cli`.

For `3 2 1` this prints:

```
ra
sa
```

Input already in order prints nothing. With no arguments nothing happens.
If any number is not made of digits after an optional minus sign, lies outside
the 32-bit signed range, or appears twice, the program prints `Error` on
standard output and nothing else. The exit status is 0 in every case.

## Library use

```python
from pushswap.solver import solve

operations = solve([3, 2, 1])  # ["ra", "sa"]
```

`solve` gives back the list of operation names that sort the values.

The `Stacks` class in `pushswap.stacks` holds the two stacks (`a` and `b`,
top at index 0) and has one method per operation. Each operation that takes
effect is appended to `Stacks.moves`, so a list of operations can be replayed
and checked:

```python
from pushswap.stacks import Stacks
from pushswap.solver import is_sorted

stacks = Stacks([3, 2, 1])
stacks.ra()
stacks.sa()
assert is_sorted(stacks.a) and not stacks.b
```

Operations that cannot apply (a swap with fewer than two elements, a push from
an empty stack) do nothing and are not recorded; `ra` and `rra` raise
`IndexError` on an empty stack `a`.

Other modules:

- `pushswap.parsing`: `parse_single` (one space-separated argument) and
  `parse_multiple` (one number per argument) return the list of numbers and
  raise `ParseError` on bad input; `has_error`, `is_number`, `split_words`,
  `parse_int` and `parse_long` are the checks they are built from.
- `pushswap.solver`: `sort_stacks`, `sort_three`, `move_min_to_top` and
  `apply_movement` work on a `Stacks` object in place.
- `pushswap.costs`: rotation-count estimates and `best_move_to_a` /
  `best_move_to_b`, which return a `Cost` naming the value to move and the
  `Movement` to use.
- `pushswap.positions`: `find_min`, `find_max`, `index_of`, and the insertion
  points `insert_index_a` / `insert_index_b`.

## What it does not do

There is no command that reads a list of operations and checks whether it
sorts a given input; replay them on a `Stacks` object instead, as shown above.

## Running the tests

```
pip install ".[test]"
pytest
```