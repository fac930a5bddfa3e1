"""Sorting stack ``a`` with the fewest practical push-swap operations."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from pushswap.stack import Node, Stacks, find_highest, find_smallest, is_sorted


def set_positions(stack: Sequence[Node]) -> None:
    """Number the nodes from the top and mark those in the upper half."""
    centerline = len(stack) // 2
    for position, node in enumerate(stack):
        node.current_position = position
        node.above_median = position <= centerline


def set_targets(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Give every node of ``b`` the node of ``a`` it should land on.

    The target is the smallest value of ``a`` greater than the node's value,
    or the smallest value of ``a`` when there is none.
    """
    for node in b:
        target = min(
            (candidate for candidate in a if candidate.value > node.value),
            key=lambda candidate: candidate.value,
            default=None,
        )
        node.target_node = target if target is not None else find_smallest(a)


def set_prices(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Compute for every node of ``b`` the rotations needed to move it."""
    len_a = len(a)
    len_b = len(b)
    for node in b:
        if node.above_median:
            price = node.current_position
        else:
            price = len_b - node.current_position
        target = node.target_node
        if target.above_median:
            price += target.current_position
        else:
            price += len_a - target.current_position
        node.push_price = price


def set_cheapest(b: Sequence[Node]) -> None:
    """Flag the first node of ``b`` with the lowest push price."""
    best = min(b, key=lambda node: node.push_price, default=None)
    if best is not None:
        best.cheapest = True


def init_nodes(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Refresh positions, targets, prices and the cheapest flag."""
    set_positions(a)
    set_positions(b)
    set_targets(a, b)
    set_prices(a, b)
    set_cheapest(b)


def _contains(stack: Iterable[Node], node: Node) -> bool:
    return any(item is node for item in stack)


def finish_rotation(stacks: Stacks, node: Node, name: str) -> None:
    """Rotate stack ``name`` ('a' or 'b') until ``node`` is on top."""
    if name == "a":
        stack, forward, backward = stacks.a, stacks.ra, stacks.rra
    elif name == "b":
        stack, forward, backward = stacks.b, stacks.rb, stacks.rrb
    else:
        raise ValueError(f"unknown stack {name!r}")
    if not _contains(stack, node):
        raise ValueError(f"node {node.value} is not on stack {name!r}")
    rotate = forward if node.above_median else backward
    while stack[0] is not node:
        rotate()


def _rotate_both(stacks: Stacks, cheapest: Node, both) -> None:
    while stacks.a[0] is not cheapest.target_node and stacks.b[0] is not cheapest:
        both()
    set_positions(stacks.a)
    set_positions(stacks.b)


def _move_nodes(stacks: Stacks) -> None:
    cheapest = next(node for node in stacks.b if node.cheapest)
    target = cheapest.target_node
    if cheapest.above_median and target.above_median:
        _rotate_both(stacks, cheapest, stacks.rr)
    elif not cheapest.above_median and not target.above_median:
        _rotate_both(stacks, cheapest, stacks.rrr)
    finish_rotation(stacks, cheapest, "b")
    finish_rotation(stacks, target, "a")
    stacks.pa()


def tiny_sort(stacks: Stacks) -> None:
    """Sort a stack ``a`` of two or three values."""
    a = stacks.a
    if len(a) < 2:
        raise ValueError("tiny_sort needs at least two values on stack a")
    highest = find_highest(a)
    if a[0] is highest:
        stacks.ra()
    elif a[1] is highest:
        stacks.rra()
    if a[0].value > a[1].value:
        stacks.sa()


def handle_five(stacks: Stacks) -> None:
    """Push the smallest values of ``a`` to ``b`` until three are left."""
    while len(stacks.a) > 3:
        init_nodes(stacks.a, stacks.b)
        finish_rotation(stacks, find_smallest(stacks.a), "a")
        stacks.pb()


def push_swap(stacks: Stacks) -> None:
    """Sort stack ``a`` of four or more values, leaving ``b`` empty."""
    len_a = len(stacks.a)
    if len_a == 5:
        handle_five(stacks)
    else:
        for _ in range(len_a - 3):
            stacks.pb()
    tiny_sort(stacks)
    while stacks.b:
        init_nodes(stacks.a, stacks.b)
        _move_nodes(stacks)
    set_positions(stacks.a)
    smallest = find_smallest(stacks.a)
    rotate = stacks.ra if smallest.above_median else stacks.rra
    while stacks.a[0] is not smallest:
        rotate()


def sort_values(values: Iterable[int]) -> List[str]:
    """Return the operations that sort ``values`` on stack ``a``."""
    stacks = Stacks(values)
    if not is_sorted(stacks.values("a")):
        if len(stacks.a) == 2:
            stacks.sa()
        elif len(stacks.a) == 3:
            tiny_sort(stacks)
        else:
            push_swap(stacks)
    return list(stacks.operations)