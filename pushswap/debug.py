"""Human-readable dump of both stacks."""

from __future__ import annotations

import sys

from pushswap.state import Element, Swap


def _cell_a(elem: Element | None) -> str:
    if elem is None:
        return " " * 11
    if elem.locked:
        return f"X{elem.value:8d}X "
    return f"{elem.value:10d} "


def _cell_b(elem: Element | None) -> str:
    return "" if elem is None else f"{elem.value:10d}"


def format_stacks(swap: Swap) -> str:
    """Return both stacks side by side with their lengths, bounds and move count."""
    stack_a, stack_b = swap.stack_a, swap.stack_b
    parts = [
        f"\n{'a':>10} {'b':>10}\n{len(stack_a):10d} {len(stack_b):10d}\n\n",
        f"min-a {stack_a.min:4d} min-b {stack_b.min:4d}\n",
        f"max-a {stack_a.max:4d} max-b {stack_b.max:4d}\n\n",
    ]
    for row in range(max(len(stack_a), len(stack_b))):
        a = stack_a.items[row] if row < len(stack_a) else None
        b = stack_b.items[row] if row < len(stack_b) else None
        parts.append(_cell_a(a) + _cell_b(b) + "\n")
    parts.append(f"commands done : {len(swap.moves)}\n")
    return "".join(parts)


def debug_print_stacks(swap: Swap) -> None:
    """Write the dump of both stacks to standard output."""
    sys.stdout.write(format_stacks(swap))