import pytest

from pushswap.state import (
    Element,
    Stack,
    Swap,
    create_swap,
    fill_index,
    find_median,
)


def test_create_swap_assigns_ranks_and_bounds():
    swap = create_swap([30, -5, 12, 7])
    assert swap.stack_a.values == [30, -5, 12, 7]
    assert swap.stack_a.indices == [3, 0, 2, 1]
    assert (swap.stack_a.min, swap.stack_a.max) == (0, 3)
    assert (swap.min, swap.max) == (0, 3)
    assert len(swap.stack_b) == 0
    assert swap.moves == []


def test_create_swap_locks_min_and_max():
    swap = create_swap([30, -5, 12, 7])
    locked = [e.value for e in swap.stack_a if e.locked]
    assert sorted(locked) == [-5, 30]


def test_create_swap_rejects_empty():
    with pytest.raises(ValueError):
        create_swap([])


def test_fill_index_is_a_permutation_matching_order():
    stack = Stack(Element(v) for v in [9, 4, 100, -3, 0])
    fill_index(stack)
    assert sorted(stack.indices) == list(range(5))
    by_index = sorted(stack, key=lambda e: e.index)
    assert [e.value for e in by_index] == sorted(stack.values)


def test_next_and_prev_wrap_around():
    swap = create_swap([1, 2, 3])
    a = swap.stack_a
    assert a.first.next is a.items[1]
    assert a.first.prev is a.last
    assert a.last.next is a.first


def test_find_index_and_missing():
    swap = create_swap([5, 1, 9])
    assert swap.stack_a.find_index(2).value == 9
    with pytest.raises(LookupError):
        swap.stack_a.find_index(7)


def test_position_of_foreign_element_raises():
    swap = create_swap([5, 1, 9])
    with pytest.raises(ValueError):
        swap.stack_a.position(Element(5))


def test_push_moves_top_and_records():
    swap = create_swap([3, 1, 2])
    top = swap.stack_a.first
    swap.push(top)
    assert swap.stack_b.first is top
    assert top.stack is swap.stack_b
    assert swap.stack_a.values == [1, 2]
    assert swap.moves == ["pb"]
    assert (swap.stack_b.min, swap.stack_b.max) == (top.index, top.index)
    swap.push(swap.stack_b.first)
    assert swap.stack_a.values == [3, 1, 2]
    assert swap.moves == ["pb", "pa"]


def test_push_none_does_nothing():
    swap = create_swap([3, 1, 2])
    swap.push(swap.stack_b.first)
    assert swap.moves == []
    assert swap.stack_a.values == [3, 1, 2]


def test_swap_exchanges_top_two():
    swap = create_swap([3, 1, 2])
    swap.swap(swap.stack_a.first)
    assert swap.stack_a.values == [1, 3, 2]
    assert swap.moves == ["sa"]


def test_swap_on_short_stack_is_not_recorded():
    swap = create_swap([3, 1, 2])
    swap.push(swap.stack_a.first)
    swap.swap(swap.stack_b.first)
    assert swap.moves == ["pb"]
    assert swap.stack_b.values == [3]


def test_swap_both_records_two_swaps():
    swap = create_swap([4, 3, 2, 1])
    swap.push(swap.stack_a.first)
    swap.push(swap.stack_a.first)
    swap.swap_both()
    assert swap.stack_a.values == [1, 2]
    assert swap.stack_b.values == [4, 3]
    assert swap.moves[-2:] == ["sa", "sb"]


def test_rotate_and_reverse_rotate_are_inverses():
    swap = create_swap([5, 6, 7, 8])
    swap.rotate(swap.stack_a.first)
    assert swap.stack_a.values == [6, 7, 8, 5]
    swap.reverse_rotate(swap.stack_a.first)
    assert swap.stack_a.values == [5, 6, 7, 8]
    assert swap.moves == ["ra", "rra"]


def test_rotate_single_element_still_recorded():
    swap = create_swap([5, 6])
    swap.push(swap.stack_a.first)
    swap.rotate(swap.stack_b.first)
    swap.reverse_rotate(swap.stack_b.first)
    assert swap.stack_b.values == [5]
    assert swap.moves == ["pb", "rb", "rrb"]


def test_rotate_both_and_reverse_both():
    swap = create_swap([1, 2, 3, 4, 5])
    swap.push(swap.stack_a.first)
    swap.push(swap.stack_a.first)
    swap.rotate_both()
    assert swap.stack_a.values == [4, 5, 3]
    assert swap.stack_b.values == [1, 2]
    swap.reverse_rotate_both()
    assert swap.stack_a.values == [3, 4, 5]
    assert swap.stack_b.values == [2, 1]
    assert swap.moves[-2:] == ["rr", "rrr"]


def test_set_min_max_keeps_values_when_empty():
    stack = Stack()
    stack.min, stack.max = 4, 9
    stack.set_min_max()
    assert (stack.min, stack.max) == (4, 9)


def test_update_min_max_after_push():
    swap = create_swap([1, 2, 3, 4])
    elem = swap.stack_a.first
    swap.stack_a._pop_first()
    swap.stack_b._push_front(elem)
    swap.update_min_max(elem)
    assert (swap.stack_b.min, swap.stack_b.max) == (elem.index, elem.index)
    assert swap.stack_a.min == min(swap.stack_a.indices)
    assert swap.stack_a.max == max(swap.stack_a.indices)


def test_find_median_skips_locked():
    swap = create_swap([10, 20, 30, 40, 50])
    median = find_median(swap.stack_a, len(swap.stack_a))
    unlocked = [e.index for e in swap.stack_a if not e.locked]
    assert not median.locked
    assert median.index in unlocked
    assert median.value == 30


def test_find_median_without_unlocked_raises():
    swap = create_swap([1, 2])
    with pytest.raises(ValueError):
        find_median(swap.stack_a, 2)


def test_swap_default_is_empty():
    swap = Swap()
    assert len(swap.stack_a) == 0 and len(swap.stack_b) == 0
    assert swap.stack_a.first is None