"""Pushing stack a onto stack b chunk by chunk of ranks."""

from __future__ import annotations

from pushswap.cost import execute_optimal_moves, find_cheapest_element
from pushswap.state import Element, Stack, Swap


def _half(diff: int) -> int:
    """Halve ``diff``, truncating towards zero."""
    return -((-diff) // 2) if diff < 0 else diff // 2


def _push_one_chunk(swap: Swap, chunk_min: int, chunk_max: int) -> None:
    pivot = chunk_min + _half(chunk_max - chunk_min)
    while True:
        cheapest = find_cheapest_element(swap, swap.stack_a, chunk_min, chunk_max)
        if cheapest is None:
            break
        execute_optimal_moves(swap, cheapest)
        if swap.stack_b.first.index > pivot:
            swap.rotate(swap.stack_b.first)


def push_chunks(swap: Swap, nb_chunks: int) -> None:
    """Push the elements of stack a to b in ``nb_chunks`` consecutive rank ranges."""
    if nb_chunks <= 0:
        raise ValueError("the number of chunks must be positive")
    chunk_size = len(swap.stack_a) // nb_chunks
    for i in range(nb_chunks):
        chunk_min = i * chunk_size
        if i == nb_chunks - 1:
            # The last bound follows the current, already shrunk, length of a.
            chunk_max = len(swap.stack_a) - 1
        else:
            chunk_max = (i + 1) * chunk_size - 1
        _push_one_chunk(swap, chunk_min, chunk_max)


def has_chunk(stack: Stack, chunk_min: int, chunk_max: int) -> bool:
    """True when some element of ``stack`` has a rank within the bounds."""
    return any(chunk_min <= elem.index <= chunk_max for elem in stack)


def find_next_chunk_elem(
    elem: Element | None, chunk_min: int, chunk_max: int
) -> Element | None:
    """Nearest element to ``elem`` with a rank in the bounds, looking below before above."""
    if elem is None or elem.stack is None:
        return None

    def in_chunk(candidate: Element) -> bool:
        return chunk_min <= candidate.index <= chunk_max

    if in_chunk(elem):
        return elem
    items = elem.stack.items
    size = len(items)
    pos = elem.stack.position(elem)
    for step in range(1, size // 2 + 2):
        below = items[(pos + step) % size]
        if in_chunk(below):
            return below
        above = items[(pos - step) % size]
        if in_chunk(above):
            return above
    return None