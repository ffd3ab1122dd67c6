"""Sorting strategies for stacks holding the ranks 0 to n-1."""

from .stacks import Stacks


def sort_three(stacks: Stacks) -> None:
    """Sort three ranks 0, 1 and 2 in stack ``a``."""
    if stacks.a[2] != 2:
        if stacks.a[0] == 2:
            stacks.rotate("a")
        else:
            stacks.rotate("a", reverse=True)
    if stacks.a[0] > stacks.a[1]:
        stacks.swap("a")


def sort_four_to_five(stacks: Stacks) -> None:
    """Sort four or five ranks: park 0 and 1 on ``b``, sort the rest, bring them back."""
    if not {0, 1} <= set(stacks.a):
        raise ValueError("stack a must hold the ranks 0 and 1")
    while len(stacks.b) <= 1:
        if stacks.a[0] in (0, 1):
            stacks.push("b")
        else:
            stacks.rotate("a")
    if stacks.b[0] == 0:
        stacks.swap("b")
    third = stacks.a[2] if len(stacks.a) > 2 else None
    if third != 4:
        if stacks.a[0] == 4:
            stacks.rotate("a")
        else:
            stacks.rotate("a", reverse=True)
    if stacks.a[0] > stacks.a[1]:
        stacks.swap("a")
    stacks.push("a")
    stacks.push("a")


def _radix_sort_stack_b(stacks: Stacks, bit_size: int, bit: int) -> None:
    for _ in range(len(stacks.b)):
        if bit > bit_size or stacks.is_sorted():
            break
        if (stacks.b[0] >> bit) & 1 == 0:
            stacks.rotate("b")
        else:
            stacks.push("a")
    if stacks.is_sorted():
        while stacks.b:
            stacks.push("a")


def radix_sort(stacks: Stacks) -> None:
    """Binary radix sort of non-negative ranks using the two stacks."""
    bit_size = max(len(stacks.a), 1).bit_length() - 1
    for bit in range(bit_size + 1):
        for _ in range(len(stacks.a)):
            if stacks.is_sorted():
                break
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.push("b")
            else:
                stacks.rotate("a")
        _radix_sort_stack_b(stacks, bit_size, bit + 1)
    while stacks.b:
        stacks.push("a")


def sort_stacks(stacks: Stacks) -> None:
    """Pick the strategy for the size of stack ``a`` and run it."""
    size = len(stacks.a)
    if size == 2 and stacks.a[0] > stacks.a[1]:
        stacks.swap("a")
    elif size == 3:
        sort_three(stacks)
    elif 4 <= size <= 5:
        sort_four_to_five(stacks)
    else:
        radix_sort(stacks)