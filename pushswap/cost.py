"""Move costs between the stacks and execution of the cheapest moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from pushswap.state import Element, Stack, Swap


@dataclass
class Cost:
    """Rotations needed before pushing ``elem`` to the other stack.

    Positive counts rotate forward, negative counts rotate in reverse;
    ``rr`` is applied to both stacks at once.
    """

    ra: int = 0
    rb: int = 0
    rr: int = 0
    total: int = -1
    elem: Element | None = None


def _positions(swap: Swap) -> dict[int, int]:
    """Offset from the top of every element on either stack."""
    return {
        id(elem): pos
        for stack in (swap.stack_a, swap.stack_b)
        for pos, elem in enumerate(stack)
    }


def _rotations(elem: Element | None, positions: dict[int, int]) -> int:
    """Signed rotations bringing ``elem`` to the top of its stack the shorter way."""
    if elem is None or elem.stack is None or len(elem.stack) == 0:
        return 0
    forward = positions[id(elem)]
    backward = len(elem.stack) - forward if forward else 0
    return forward if forward <= backward else -backward


def _target_in_a(stack_a: Stack, elem_b: Element) -> Element | None:
    if len(stack_a) == 0:
        return None
    if elem_b.index < stack_a.min or elem_b.index > stack_a.max:
        return stack_a.find_index(stack_a.min)
    items = stack_a.items
    for cur, nxt in zip(items, items[1:] + items[:1]):
        if cur.index < elem_b.index < nxt.index:
            return nxt
    return None


def _target_in_b(stack_b: Stack, elem_a: Element) -> Element | None:
    items = stack_b.items
    for pos, cur in enumerate(items):
        if cur.index < elem_a.index and items[pos - 1].index > elem_a.index:
            return cur
    return None


def get_target(swap: Swap, source: Element) -> Element | None:
    """The element of the other stack that ``source`` should land in front of."""
    if source.stack is swap.stack_a:
        return _target_in_b(swap.stack_b, source)
    return _target_in_a(swap.stack_a, source)


def _cost_a_to_b(swap: Swap, elem: Element, positions: dict[int, int]) -> Cost:
    ra = _rotations(elem, positions)
    rb = _rotations(get_target(swap, elem), positions)
    if ra == 0:
        rb = 0
    rr = 0
    if ra > 0 and rb > 0 and ra > rb:
        rr = min(ra, rb)
    elif ra < 0 and rb < 0 and ra < rb:
        rr = max(ra, rb)
    ra -= rr
    # Only the rotations of stack a are kept when pushing towards b.
    return Cost(ra=ra, rb=0, rr=rr, total=abs(ra) + abs(rr) + 1, elem=elem)


def _cost_b_to_a(swap: Swap, elem: Element, positions: dict[int, int]) -> Cost:
    ra = _rotations(get_target(swap, elem), positions)
    rb = _rotations(elem, positions)
    rr = 0
    if ra > 0 and rb > 0:
        rr = min(ra, rb)
    elif ra < 0 and rb < 0:
        rr = max(ra, rb)
    ra -= rr
    rb -= rr
    return Cost(ra=ra, rb=rb, rr=rr, total=abs(ra) + abs(rb) + abs(rr) + 1, elem=elem)


def find_cheapest_element(
    swap: Swap, source_stack: Stack, chunk_min: int, chunk_max: int
) -> Cost | None:
    """Cheapest element to push from ``source_stack``, or None when there is none.

    From stack a only ranks within ``chunk_min``..``chunk_max`` are considered;
    from stack b every element is.
    """
    from_a = source_stack is swap.stack_a
    from_b = source_stack is swap.stack_b
    positions = _positions(swap)
    cheapest: Cost | None = None
    for elem in source_stack:
        if not ((from_a and chunk_min <= elem.index <= chunk_max) or from_b):
            continue
        if elem.stack is swap.stack_a:
            cost = _cost_a_to_b(swap, elem, positions)
        else:
            cost = _cost_b_to_a(swap, elem, positions)
        if cheapest is None or cost.total < cheapest.total:
            cheapest = cost
    return cheapest


def _repeat(count: int, forward: Callable[[], None], backward: Callable[[], None]) -> None:
    step = forward if count > 0 else backward
    for _ in range(abs(count)):
        step()


def execute_optimal_moves(swap: Swap, cost: Cost) -> None:
    """Perform the rotations of ``cost`` and then push its element."""
    _repeat(cost.rr, swap.rotate_both, swap.reverse_rotate_both)
    _repeat(
        cost.ra,
        lambda: swap.rotate(swap.stack_a.first),
        lambda: swap.reverse_rotate(swap.stack_a.first),
    )
    _repeat(
        cost.rb,
        lambda: swap.rotate(swap.stack_b.first),
        lambda: swap.reverse_rotate(swap.stack_b.first),
    )
    swap.push(cost.elem)


def push_back_to_a_optimized(swap: Swap) -> None:
    """Push every element of stack b back onto a, cheapest first."""
    while len(swap.stack_b) > 0:
        cheapest = find_cheapest_element(swap, swap.stack_b, 0, 0)
        if cheapest is None:
            return
        execute_optimal_moves(swap, cheapest)