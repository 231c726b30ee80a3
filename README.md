# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and only
these operations:

| move  | effect                                           |
|-------|--------------------------------------------------|
| `sa`  | swap the first two elements of `a`               |
| `sb`  | swap the first two elements of `b`               |
| `ss`  | `sa` and `sb` at once                            |
| `pa`  | take the top of `b` and put it on top of `a`     |
| `pb`  | take the top of `a` and put it on top of `b`     |
| `ra`  | rotate `a` up: the first element becomes last    |
| `rb`  | rotate `b` up                                    |
| `rr`  | `ra` and `rb` at once                            |
| `rra` | rotate `a` down: the last element becomes first  |
| `rrb` | rotate `b` down                                  |
| `rrr` | `rra` and `rrb` at once                          |

The package ships two commands: one that finds a short sequence of moves
sorting the numbers, and one that checks whether a sequence of moves does.

## Installation

```
pip install .
```

## Finding the moves

Give the numbers as separate arguments, the first one being the top of
stack `a`:

```
push-swap 3 2 1 5 4
```

One move is written per line on standard output. Stack `a` ends up in
ascending order with `b` empty. A list that is already sorted, or only needs
rotating into place, produces just the rotations needed, or nothing at all.

Stacks of two or three numbers are sorted directly. Larger ones are pushed
to `b` until three numbers remain in `a`, those three are sorted, and the
rest are brought back one by one, always choosing the element that costs the
fewest moves to place. Beyond 100 numbers the values are first pushed over
in chunks of ranks (5 chunks up to 500 numbers, then one chunk per 25
numbers).

## Checking moves

`push-swap-checker` takes the same numbers as arguments and reads moves from
standard input, one per line. At the end of input, or at the first empty
line, it prints `OK` if `a` is sorted and `b` is empty, and `KO` otherwise:

```
push-swap 3 2 1 5 4 | push-swap-checker 3 2 1 5 4
```

An unknown move prints `Error` on standard error and stops with exit
status 1.

## Input rules

Both commands reject their input with `Error` on standard error and exit
status 1 when:

- an argument is empty or is not a plain integer (an optional `+` or `-`
  followed by digits);
- a value overflows a 32-bit signed integer (digit strings so long that
  they also overflow 64 bits are wrapped rather than rejected);
- a value appears more than once (`0`, `+0`, `-00` all count as zero).

Each number must be its own argument; a single quoted string such as
`"3 2 1"` is not split and is rejected. With no arguments at all, both
commands do nothing and exit successfully.

## Using it from Python

```python
from pushswap.cli import solve
from pushswap.checker import run_checker, apply_move, InvalidMoveError
from pushswap.parsing import check_input, parse_values, InputError
```

- `solve(args)` returns the list of moves for a list of argument strings,
  raising `InputError` on bad input.
- `run_checker(args, stream)` replays the moves read from an iterable of
  lines and returns `True` when they leave `a` sorted and `b` empty;
  `apply_move(swap, move)` performs a single move and raises
  `InvalidMoveError` for an unknown one.
- `check_input(args)` tells whether arguments are acceptable;
  `parse_values(args)` converts them to integers or raises `InputError`.
- `pushswap.state` holds the stack model: `create_swap(values)` builds the
  starting position, and `Swap` offers `push`, `swap`, `swap_both`,
  `rotate`, `rotate_both`, `reverse_rotate` and `reverse_rotate_both`,
  recording each move in `Swap.moves`. `Stack` and `Element` are the stacks
  and the numbers on them.
- `pushswap.debug.format_stacks(swap)` returns both stacks side by side with
  their lengths, bounds and move count; `debug_print_stacks(swap)` writes it
  to standard output.

The package also carries small helpers used by the rest of it:
`pushswap.numconv` (integer parsing and formatting with 32- and 64-bit
wrap-around), `pushswap.strutils` and `pushswap.chartype` (string and ASCII
character helpers), and `pushswap.printf` with `sprintf(fmt, *args)` and
`printf(fmt, *args)`, which understand the conversions `c s p d i u x X %`
with the flags `- 0 # + space`, a width and a precision.

## Running the tests

```
pip install .[test]
pytest
```