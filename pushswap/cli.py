"""Command that prints a list of moves sorting the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.chunk import push_chunks
from pushswap.cost import push_back_to_a_optimized
from pushswap.parsing import InputError, parse_values
from pushswap.sort_utils import hard_sort, is_circularly_sorted, rotate_to
from pushswap.state import Swap, create_swap, find_median


def calculate_chunk_count(length: int) -> int:
    """Number of rank chunks used for an input of ``length`` numbers."""
    if length <= 100:
        return 1
    if length <= 500:
        return 5
    return length // 25


def sort_stack(swap: Swap) -> None:
    """Leave stack a in ascending order up to a rotation, with stack b empty."""
    stack_a, stack_b = swap.stack_a, swap.stack_b
    if len(stack_a) <= 3:
        hard_sort(swap)
        return
    pivot = find_median(stack_a, len(stack_a))
    while len(stack_a) > 3:
        if stack_a.first.index == swap.max:
            swap.rotate(stack_a.first)
        swap.push(stack_a.first)
        if stack_b.first.index > pivot.index:
            swap.rotate(stack_b.first)
    hard_sort(swap)
    push_back_to_a_optimized(swap)


def solve(args: Sequence[str]) -> list[str]:
    """Return the moves that sort the numbers ``args``; raise InputError when invalid."""
    swap = create_swap(parse_values(args))
    if is_circularly_sorted(swap.stack_a) != 1:
        chunks = calculate_chunk_count(len(args))
        if chunks > 1:
            push_chunks(swap, chunks)
        sort_stack(swap)
    rotate_to(swap, swap.stack_a.find_index(swap.stack_a.min))
    return list(swap.moves)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the moves for the command-line numbers; return the exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        moves = solve(args)
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{move}\n" for move in moves))
    return 0


if __name__ == "__main__":
    sys.exit(main())