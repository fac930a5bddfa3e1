"""The two stacks of the puzzle and the operations that act on them."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterable, List, Optional


@dataclass(eq=False)
class Node:
    """One number on a stack together with the sorter's bookkeeping."""

    value: int
    current_position: int = 0
    final_index: int = 0
    push_price: int = 0
    above_median: bool = False
    cheapest: bool = False
    target_node: Optional["Node"] = None


def _swap(stack: Deque[Node]) -> None:
    if len(stack) > 1:
        stack[0], stack[1] = stack[1], stack[0]


def _push(dest: Deque[Node], src: Deque[Node]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: Deque[Node]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: Deque[Node]) -> None:
    stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b``; the top of each stack is at index 0.

    Every operation is recorded by name in ``operations``, even when it
    leaves the stacks unchanged (for instance a swap on a one-element stack).
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: Deque[Node] = deque(Node(value) for value in values)
        self.b: Deque[Node] = deque()
        self.operations: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.values('a')!r}, b={self.values('b')!r})"

    def sa(self) -> None:
        """Swap the first two elements of a."""
        _swap(self.a)
        self.operations.append("sa")

    def sb(self) -> None:
        """Swap the first two elements of b."""
        _swap(self.b)
        self.operations.append("sb")

    def ss(self) -> None:
        """sa and sb at once."""
        _swap(self.a)
        _swap(self.b)
        self.operations.append("ss")

    def pa(self) -> None:
        """Move the top of b onto a."""
        _push(self.a, self.b)
        self.operations.append("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        _push(self.b, self.a)
        self.operations.append("pb")

    def ra(self) -> None:
        """Move the top of a to its bottom."""
        _rotate(self.a)
        self.operations.append("ra")

    def rb(self) -> None:
        """Move the top of b to its bottom."""
        _rotate(self.b)
        self.operations.append("rb")

    def rr(self) -> None:
        """ra and rb at once."""
        _rotate(self.a)
        _rotate(self.b)
        self.operations.append("rr")

    def rra(self) -> None:
        """Move the bottom of a to its top."""
        _reverse_rotate(self.a)
        self.operations.append("rra")

    def rrb(self) -> None:
        """Move the bottom of b to its top."""
        _reverse_rotate(self.b)
        self.operations.append("rrb")

    def rrr(self) -> None:
        """rra and rrb at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.operations.append("rrr")

    _OPERATIONS = frozenset(
        ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")
    )

    def apply(self, op: str) -> None:
        """Perform the operation named ``op``."""
        if op not in self._OPERATIONS:
            raise ValueError(f"unknown operation {op!r}")
        getattr(self, op)()

    def values(self, name: str = "a") -> List[int]:
        """Return the values of stack ``name`` ('a' or 'b'), top first."""
        if name == "a":
            stack = self.a
        elif name == "b":
            stack = self.b
        else:
            raise ValueError(f"unknown stack {name!r}")
        return [node.value for node in stack]


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values are in non-decreasing order."""
    items = list(values)
    return all(first <= second for first, second in zip(items, items[1:]))


def find_smallest(nodes: Iterable[Node]) -> Optional[Node]:
    """Return the first node holding the smallest value, or None."""
    return min(nodes, key=lambda node: node.value, default=None)


def find_highest(nodes: Iterable[Node]) -> Optional[Node]:
    """Return the first node holding the highest value, or None."""
    return max(nodes, key=lambda node: node.value, default=None)