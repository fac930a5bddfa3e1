import itertools
import random

import pytest

from pushswap.sorter import (
    finish_rotation,
    handle_five,
    init_nodes,
    push_swap,
    set_cheapest,
    set_positions,
    set_prices,
    set_targets,
    sort_values,
    tiny_sort,
)
from pushswap.stack import Stacks


def _replay(values, operations):
    stacks = Stacks(values)
    for op in operations:
        stacks.apply(op)
    return stacks


def test_sorted_input_needs_no_operations():
    assert sort_values([1, 2, 3, 4, 5]) == []
    assert sort_values([]) == []
    assert sort_values([42]) == []


def test_two_values_use_a_single_swap():
    assert sort_values([2, 1]) == ["sa"]


@pytest.mark.parametrize("size", [3, 4, 5, 6])
def test_all_permutations_are_sorted(size):
    for perm in itertools.permutations(range(size)):
        operations = sort_values(perm)
        stacks = _replay(perm, operations)
        assert stacks.values("a") == sorted(perm)
        assert stacks.values("b") == []


def test_three_values_take_at_most_two_operations():
    for perm in itertools.permutations([-7, 0, 9]):
        assert len(sort_values(perm)) <= 2


@pytest.mark.parametrize("seed", [0, 1, 2])
def test_hundred_random_values_are_sorted(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-100000, 100000), 100)
    stacks = _replay(values, sort_values(values))
    assert stacks.values("a") == sorted(values)
    assert stacks.values("b") == []


def test_extreme_values_are_sorted():
    values = [2147483647, -2147483648, 0, 5, -5]
    stacks = _replay(values, sort_values(values))
    assert stacks.values("a") == sorted(values)


def test_set_positions_numbers_from_top():
    stacks = Stacks([5, 6, 7, 8, 9])
    set_positions(stacks.a)
    assert [node.current_position for node in stacks.a] == [0, 1, 2, 3, 4]
    centre = len(stacks.a) // 2
    assert all(
        node.above_median == (node.current_position <= centre) for node in stacks.a
    )


def test_set_targets_picks_next_larger_or_smallest():
    stacks = Stacks([10, 30, 20])
    stacks.b.extend(Stacks([15, 40, 25]).a)
    set_targets(stacks.a, stacks.b)
    targets = {node.value: node.target_node.value for node in stacks.b}
    assert targets == {15: 20, 40: 10, 25: 30}


def test_set_prices_example():
    stacks = Stacks([10, 20, 30])
    stacks.b.extend(Stacks([25]).a)
    set_positions(stacks.a)
    set_positions(stacks.b)
    set_targets(stacks.a, stacks.b)
    set_prices(stacks.a, stacks.b)
    assert stacks.b[0].target_node is stacks.a[2]
    assert stacks.b[0].push_price == 1


def test_set_cheapest_flags_first_minimum():
    nodes = Stacks([1, 2, 3]).a
    for node, price in zip(nodes, [4, 2, 2]):
        node.push_price = price
    set_cheapest(nodes)
    assert [node.cheapest for node in nodes] == [False, True, False]


def test_set_cheapest_on_empty_stack_does_nothing():
    nodes = Stacks([]).a
    set_cheapest(nodes)
    assert list(nodes) == []


def test_init_nodes_flags_exactly_one_node_in_b():
    stacks = Stacks([3, 8, 1, 6])
    stacks.pb()
    stacks.pb()
    init_nodes(stacks.a, stacks.b)
    assert sum(node.cheapest for node in stacks.b) == 1
    assert all(node.target_node in stacks.a for node in stacks.b)


def test_finish_rotation_brings_node_to_top():
    stacks = Stacks([4, 5, 6, 7, 8])
    set_positions(stacks.a)
    node = stacks.a[3]
    finish_rotation(stacks, node, "a")
    assert stacks.a[0] is node
    assert set(stacks.operations) == {"rra"}


def test_finish_rotation_rejects_unknown_stack():
    stacks = Stacks([1, 2])
    with pytest.raises(ValueError):
        finish_rotation(stacks, stacks.a[0], "c")


def test_finish_rotation_rejects_foreign_node():
    stacks = Stacks([1, 2])
    other = Stacks([3]).a[0]
    with pytest.raises(ValueError):
        finish_rotation(stacks, other, "a")


def test_tiny_sort_sorts_three_values():
    for perm in itertools.permutations([1, 2, 3]):
        stacks = Stacks(perm)
        tiny_sort(stacks)
        assert stacks.values("a") == [1, 2, 3]


def test_tiny_sort_rejects_single_value():
    with pytest.raises(ValueError):
        tiny_sort(Stacks([1]))


def test_handle_five_moves_two_smallest_to_b():
    stacks = Stacks([50, 10, 40, 20, 30])
    handle_five(stacks)
    assert sorted(stacks.values("a")) == [30, 40, 50]
    assert stacks.values("b") == [20, 10]


def test_push_swap_empties_b():
    values = [9, -3, 12, 0, 7, 4, 1]
    stacks = Stacks(values)
    push_swap(stacks)
    assert stacks.values("a") == sorted(values)
    assert stacks.values("b") == []