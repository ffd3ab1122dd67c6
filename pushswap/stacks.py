"""The two stacks of the puzzle and the moves that act on them."""

from dataclasses import dataclass, field
from typing import List, Optional, TextIO

from .output import putendl

_NAMES = ("a", "b")


@dataclass
class Stacks:
    """Stacks ``a`` and ``b``, top first, with a record of every move made.

    Each move is appended to ``moves`` and, when ``out`` is set, written to it
    on its own line as it happens.
    """

    a: List[int]
    b: List[int] = field(default_factory=list)
    moves: List[str] = field(default_factory=list)
    out: Optional[TextIO] = None

    def _stack(self, name: str) -> List[int]:
        if name not in _NAMES:
            raise ValueError(f"unknown stack {name!r}, expected 'a' or 'b'")
        return self.a if name == "a" else self.b

    def _record(self, move: str) -> None:
        self.moves.append(move)
        if self.out is not None:
            putendl(move, self.out)

    def swap(self, stack: str) -> None:
        """Exchange the top two elements of ``stack`` (``sa`` or ``sb``)."""
        items = self._stack(stack)
        if len(items) < 2:
            return
        items[0], items[1] = items[1], items[0]
        self._record("s" + stack)

    def push(self, target: str) -> None:
        """Move the top of the other stack onto ``target`` (``pa`` or ``pb``).

        Nothing happens when the other stack is empty.
        """
        destination = self._stack(target)
        source = self.b if target == "a" else self.a
        if not source:
            return
        destination.insert(0, source.pop(0))
        self._record("p" + target)

    def rotate(self, stack: str, reverse: bool = False) -> None:
        """Rotate ``stack``: the top goes to the bottom (``ra``/``rb``),
        or with ``reverse`` the bottom comes to the top (``rra``/``rrb``)."""
        items = self._stack(stack)
        if not items:
            return
        if reverse:
            items.insert(0, items.pop())
            self._record("rr" + stack)
        else:
            items.append(items.pop(0))
            self._record("r" + stack)

    def is_sorted(self) -> bool:
        """True when ``a`` is in non-decreasing order; ``b`` is not looked at."""
        return all(x <= y for x, y in zip(self.a, self.a[1:]))