import io

import pytest

from pushswap.stacks import Stacks


def test_swap_exchanges_top_two_of_a():
    stacks = Stacks([1, 2, 3])
    stacks.swap("a")
    assert stacks.a == [2, 1, 3]
    assert stacks.moves == ["sa"]


def test_swap_needs_two_elements():
    stacks = Stacks([1, 2], b=[7])
    stacks.swap("b")
    assert stacks.b == [7]
    assert stacks.moves == []


def test_push_moves_top_between_stacks():
    stacks = Stacks([1, 2, 3])
    stacks.push("b")
    assert stacks.a == [2, 3]
    assert stacks.b == [1]
    stacks.push("a")
    assert stacks.a == [1, 2, 3]
    assert stacks.b == []
    assert stacks.moves == ["pb", "pa"]


def test_push_from_empty_stack_does_nothing():
    stacks = Stacks([1])
    stacks.push("a")
    assert stacks.a == [1]
    assert stacks.moves == []


def test_rotate_up_and_down():
    stacks = Stacks([1, 2, 3])
    stacks.rotate("a")
    assert stacks.a == [2, 3, 1]
    stacks.rotate("a", reverse=True)
    assert stacks.a == [1, 2, 3]
    assert stacks.moves == ["ra", "rra"]


def test_rotate_b_names_move():
    stacks = Stacks([], b=[4, 5, 6])
    stacks.rotate("b", reverse=True)
    assert stacks.b == [6, 4, 5]
    assert stacks.moves == ["rrb"]


def test_full_rotation_restores_order():
    values = [9, 4, 7, 1, 3]
    stacks = Stacks(list(values))
    for _ in values:
        stacks.rotate("a")
    assert stacks.a == values


def test_is_sorted_is_non_strict_and_ignores_b():
    assert Stacks([1, 2, 2, 3]).is_sorted() is True
    assert Stacks([2, 1]).is_sorted() is False
    assert Stacks([]).is_sorted() is True
    assert Stacks([1, 2], b=[5, 3]).is_sorted() is True


def test_unknown_stack_name_raises():
    with pytest.raises(ValueError):
        Stacks([1, 2]).swap("c")


def test_moves_are_written_to_stream():
    out = io.StringIO()
    stacks = Stacks([1, 2, 3], out=out)
    stacks.push("b")
    stacks.rotate("a")
    assert out.getvalue() == "pb\nra\n"