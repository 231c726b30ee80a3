"""The two stacks of the puzzle, their elements and the moves that change them."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import cycle, islice
from typing import Iterable, Iterator


@dataclass(eq=False)
class Element:
    """One number on a stack, with its rank among all the numbers."""

    value: int
    index: int = 0
    locked: bool = False
    stack: Stack | None = field(default=None, repr=False)

    @property
    def next(self) -> Element | None:
        """The element below this one, wrapping round to the top."""
        if self.stack is None:
            return None
        items = self.stack.items
        return items[(self.stack.position(self) + 1) % len(items)]

    @property
    def prev(self) -> Element | None:
        """The element above this one, wrapping round to the bottom."""
        if self.stack is None:
            return None
        items = self.stack.items
        return items[(self.stack.position(self) - 1) % len(items)]


class Stack:
    """A circular stack of elements; the first item is the top."""

    def __init__(self, elements: Iterable[Element] = ()) -> None:
        self.items: list[Element] = []
        self.min = 0
        self.max = 0
        for elem in elements:
            self.append(elem)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Element]:
        return iter(self.items)

    def __contains__(self, elem: object) -> bool:
        return any(item is elem for item in self.items)

    def __repr__(self) -> str:
        return f"Stack({[e.value for e in self.items]!r}, min={self.min}, max={self.max})"

    @property
    def first(self) -> Element | None:
        return self.items[0] if self.items else None

    @property
    def last(self) -> Element | None:
        return self.items[-1] if self.items else None

    @property
    def values(self) -> list[int]:
        return [e.value for e in self.items]

    @property
    def indices(self) -> list[int]:
        return [e.index for e in self.items]

    def append(self, elem: Element) -> None:
        """Add ``elem`` at the bottom of the stack."""
        elem.stack = self
        self.items.append(elem)

    def _push_front(self, elem: Element) -> None:
        elem.stack = self
        self.items.insert(0, elem)

    def _pop_first(self) -> Element | None:
        return self.items.pop(0) if self.items else None

    def position(self, elem: Element) -> int:
        """Offset of ``elem`` from the top of the stack."""
        for pos, item in enumerate(self.items):
            if item is elem:
                return pos
        raise ValueError("element is not on this stack")

    def find_index(self, index: int) -> Element:
        """Return the element of rank ``index``."""
        for elem in self.items:
            if elem.index == index:
                return elem
        raise LookupError(f"no element with index {index} on this stack")

    def set_min_max(self) -> None:
        """Recompute the smallest and largest rank; an empty stack keeps its old values."""
        if not self.items:
            return
        ranks = [e.index for e in self.items]
        self.min = min(ranks)
        self.max = max(ranks)


@dataclass
class Swap:
    """Both stacks together with the record of the moves made so far."""

    stack_a: Stack = field(default_factory=Stack)
    stack_b: Stack = field(default_factory=Stack)
    min: int = 0
    max: int = 0
    moves: list[str] = field(default_factory=list)

    def _other(self, stack: Stack | None) -> Stack:
        return self.stack_b if stack is self.stack_a else self.stack_a

    def _name(self, stack: Stack | None) -> str:
        return "a" if stack is self.stack_a else "b"

    def push(self, elem: Element | None) -> None:
        """Move the top of ``elem``'s stack onto the other stack (pa or pb)."""
        if elem is None or elem.stack is None:
            return
        source = elem.stack
        target = self._other(source)
        moved = source._pop_first()
        if moved is not None:
            target._push_front(moved)
        self.stack_a.set_min_max()
        self.stack_b.set_min_max()
        self.moves.append("pb" if source is self.stack_a else "pa")

    def _exchange(self, stack: Stack) -> None:
        stack.items[0], stack.items[1] = stack.items[1], stack.items[0]

    def swap(self, elem: Element | None) -> None:
        """Exchange the two top elements of ``elem``'s stack (sa or sb)."""
        if elem is None or elem.stack is None or len(elem.stack) < 2:
            return
        stack = elem.stack
        self._exchange(stack)
        self.moves.append("s" + self._name(stack))

    def swap_both(self) -> None:
        """Swap the tops of both stacks, recorded as the two single swaps."""
        self.swap(self.stack_a.first)
        self.swap(self.stack_b.first)

    @staticmethod
    def _rotate_stack(stack: Stack | None, reverse: bool) -> None:
        if stack is None or len(stack) < 2:
            return
        if reverse:
            stack.items.insert(0, stack.items.pop())
        else:
            stack.items.append(stack.items.pop(0))

    def rotate(self, elem: Element | None) -> None:
        """Move the top of ``elem``'s stack to the bottom (ra or rb)."""
        if elem is None:
            return
        self._rotate_stack(elem.stack, reverse=False)
        self.moves.append("r" + self._name(elem.stack))

    def rotate_both(self) -> None:
        """Rotate both stacks at once (rr)."""
        self._rotate_stack(self.stack_a, reverse=False)
        self._rotate_stack(self.stack_b, reverse=False)
        self.moves.append("rr")

    def reverse_rotate(self, elem: Element | None) -> None:
        """Move the bottom of ``elem``'s stack to the top (rra or rrb)."""
        if elem is None:
            return
        self._rotate_stack(elem.stack, reverse=True)
        self.moves.append("rr" + self._name(elem.stack))

    def reverse_rotate_both(self) -> None:
        """Reverse-rotate both stacks at once (rrr)."""
        self._rotate_stack(self.stack_a, reverse=True)
        self._rotate_stack(self.stack_b, reverse=True)
        self.moves.append("rrr")

    def update_min_max(self, elem: Element | None) -> None:
        """Refresh the bounds after ``elem`` has just been pushed onto its stack."""
        if elem is None or elem.stack is None:
            return
        previous = self._other(elem.stack)
        if elem.index in (previous.min, previous.max):
            previous.set_min_max()
        stack = elem.stack
        if elem.index < stack.min or len(stack) == 1:
            stack.min = elem.index
        if elem.index > stack.max or len(stack) == 1:
            stack.max = elem.index


def fill_index(stack: Stack) -> None:
    """Give every element its rank among the values of ``stack``."""
    ranks = {value: rank for rank, value in enumerate(sorted(stack.values))}
    for elem in stack:
        elem.index = ranks[elem.value]


def find_median(stack: Stack, count: int) -> Element:
    """Median element of the first ``count`` unlocked elements, read circularly from the top."""
    unlocked = [e.index for e in stack if not e.locked]
    if count <= 0 or not unlocked:
        raise ValueError("no unlocked elements to take a median of")
    picked = sorted(islice(cycle(unlocked), count))
    return stack.find_index(picked[(count - 1) // 2])


def create_swap(values: Iterable[int]) -> Swap:
    """Build the starting position: all ``values`` on stack a, stack b empty."""
    stack_a = Stack(Element(value) for value in values)
    if not len(stack_a):
        raise ValueError("at least one value is needed")
    fill_index(stack_a)
    stack_a.set_min_max()
    swap = Swap(stack_a=stack_a, stack_b=Stack(), min=stack_a.min, max=stack_a.max)
    stack_a.find_index(stack_a.min).locked = True
    stack_a.find_index(stack_a.max).locked = True
    return swap