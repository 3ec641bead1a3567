# pushswap

Sorts a list of distinct integers with two stacks, `a` and `b`, and prints the operations that do it:

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa`, `pb` | push the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate up: the top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate down: the bottom element comes to the top |

Two or three numbers are sorted directly. Larger inputs use a cost-based insertion. Two numbers go to `b` first. Each further number is then pushed to `b` at the point that needs the fewest rotations, until three remain in `a`. Those three are sorted, and the numbers in `b` are merged back into `a` in order.

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
push-swap "5 -1 4 0 2"
```

The arguments are joined with spaces and split on the space character. Numbers can therefore be separate arguments, one space-separated string, or a mix of both. One operation is printed per line on standard output.

- With no arguments, or only empty ones, nothing is printed and the exit status is 0.
- If the input is already sorted, nothing is printed.
- Every word must be a decimal integer in plain form that fits a 32-bit signed integer. An optional `-` is allowed, but not `+5`, `007`, `-0` or `1.5`, and no number may appear twice. Otherwise the command prints `Error` on standard output and exits with status 255.

## Library

```python
from pushswap.args import ArgumentError, parse_numbers
from pushswap.solver import sort_stacks
from pushswap.stacks import Operation, Stacks, is_sorted

values = parse_numbers(["3", "2", "1"])   # [3, 2, 1]
operations = sort_stacks(values)          # list of Operation

stacks = Stacks(values)
for op in operations:
    stacks.apply(op)
assert is_sorted(stacks.a) and not stacks.b
```

- `pushswap.args`
  - `split_args(argv)`: splits the arguments into words.
  - `validate(words)`: checks the words and returns the integers. It raises `ArgumentError`, a `ValueError`, for anything invalid.
  - `parse_numbers(argv)`: does both.
- `pushswap.solver`
  - `sort_stacks(values)`: returns the operations that sort `values` in stack `a`, smallest on top. It returns an empty list for empty or already sorted input.
  - `calc_cost`, `target_in_a`, `target_in_b` and `RotationCost`: the pieces of the cost computation.
- `pushswap.stacks`
  - `Stacks(values)`: holds the two stacks as deques `a` and `b`, with the top at the left end.
  - `Stacks.apply(op)`: performs an `Operation` or its name and records it in `Stacks.operations`. An unknown name raises `ValueError`. It raises `IndexError` when a stack holds too few elements, and the stacks are left unchanged.
  - `is_sorted` and `is_reverse_sorted`: check a non-empty sequence.
- `pushswap.cli.main(argv=None)`: the command-line entry point. It returns the exit status.

The `pushswap.ft` sub-package has the small helpers the rest is built on:

- `chars`: ASCII classification and case conversion.
- `convert`: `atoi` and `itoa` with 32-bit wrap-around, and `split`.
- `memory`: byte-buffer helpers.
- `strings`: string search, compare and bounded copy.
- `lists`: a singly linked `Node` list.
- `output`: `putchar_fd` and its relatives, and a small `printf` and `format_printf`.

## What it does not do

There is no checker command that reads operations from standard input and reports whether they sort a given list. To check a sequence of operations, apply it to a `Stacks` in Python, as shown above.

## Tests

```
pip install .[test]
pytest
```