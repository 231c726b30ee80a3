"""Check that a list of moves read from input sorts the given numbers."""

from __future__ import annotations

import sys
from typing import Callable, Iterable, Iterator, Sequence

from pushswap.parsing import InputError, parse_values
from pushswap.sort_utils import is_sorted
from pushswap.state import Swap, create_swap


class InvalidMoveError(ValueError):
    """Raised for a line that names no known move."""


_MOVES: dict[str, Callable[[Swap], None]] = {
    "sa": lambda s: s.swap(s.stack_a.first),
    "ra": lambda s: s.rotate(s.stack_a.first),
    "rra": lambda s: s.reverse_rotate(s.stack_a.first),
    "sb": lambda s: s.swap(s.stack_b.first),
    "rb": lambda s: s.rotate(s.stack_b.first),
    "rrb": lambda s: s.reverse_rotate(s.stack_b.first),
    "ss": lambda s: s.swap_both(),
    "rr": lambda s: s.rotate_both(),
    "rrr": lambda s: s.reverse_rotate_both(),
    "pa": lambda s: s.push(s.stack_b.first),
    "pb": lambda s: s.push(s.stack_a.first),
}


def apply_move(swap: Swap, move: str) -> None:
    """Perform the move named ``move`` on ``swap``."""
    try:
        action = _MOVES[move]
    except KeyError:
        raise InvalidMoveError(f"unknown move {move!r}") from None
    action(swap)


def read_moves(stream: Iterable[str]) -> Iterator[str]:
    """Yield the moves of ``stream``, one per line; an empty line ends the input."""
    for raw in stream:
        line = raw[:-1] if raw.endswith("\n") else raw
        if line == "":
            return
        yield line


def _is_finished(swap: Swap) -> bool:
    return len(swap.stack_b) == 0 and bool(is_sorted(swap.stack_a))


def run_checker(args: Sequence[str], stream: Iterable[str]) -> bool:
    """Apply the moves from ``stream`` to the numbers ``args``; True if they end sorted."""
    swap = create_swap(parse_values(args))
    for move in read_moves(stream):
        apply_move(swap, move)
    return _is_finished(swap)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the checker on the command line and standard input; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        result = run_checker(args, sys.stdin)
    except (InputError, InvalidMoveError):
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("OK\n" if result else "KO\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())