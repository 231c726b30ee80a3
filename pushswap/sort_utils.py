"""Order checks and small sorting helpers for the stacks."""

from __future__ import annotations

from pushswap.state import Element, Stack, Swap


def is_circularly_sorted(stack: Stack | None) -> int:
    """1 if ascending up to a rotation, -1 if descending up to a rotation, else 0."""
    if stack is None or len(stack) <= 1:
        return 1
    items = stack.items
    pairs = list(zip(items, items[1:] + items[:1]))
    asc_breaks = sum(cur.index > nxt.index for cur, nxt in pairs)
    desc_breaks = sum(cur.index < nxt.index for cur, nxt in pairs)
    if asc_breaks <= 1:
        return 1
    if desc_breaks <= 1:
        return -1
    return 0


def is_sorted(stack: Stack | None) -> int:
    """Non-zero when the stack, read from the top, is monotonic.

    The result is positive for an ascending stack, negative for a descending
    one and 0 when the order breaks.
    """
    if stack is None or len(stack) <= 1:
        return 1
    items = stack.items
    order = items[0].index - items[1].index
    if order:
        for cur, nxt in zip(items, items[1:]):
            if cur.index > nxt.index and order < 0:
                return 0
            if cur.index < nxt.index and order > 0:
                return 0
    return -order


def r_or_rr(elem: Element | None) -> int:
    """Rotations needed to bring ``elem`` to the top: positive forward, negative reverse."""
    if elem is None or elem.stack is None or len(elem.stack) == 0:
        return 0
    r_count = elem.stack.position(elem)
    rr_count = 0 if r_count == 0 else len(elem.stack) - r_count
    return r_count if r_count <= rr_count else -rr_count


def rotate_to(swap: Swap | None, elem: Element | None) -> None:
    """Rotate ``elem``'s stack the shorter way until ``elem`` is on top."""
    if swap is None or elem is None or elem.stack is None or elem is elem.stack.first:
        return
    reverse = r_or_rr(elem) < 0
    while elem.stack.first is not elem:
        if reverse:
            swap.reverse_rotate(elem)
        else:
            swap.rotate(elem)


def hard_sort(swap: Swap) -> None:
    """Sort stack a directly when it holds two or three elements."""
    stack_a = swap.stack_a
    if len(stack_a) == 2 and stack_a.first.index > stack_a.last.index:
        swap.swap(stack_a.first)
    if len(stack_a) == 3:
        if is_circularly_sorted(stack_a) != 1:
            swap.swap(stack_a.first)
        rotate_to(swap, stack_a.find_index(stack_a.min))