import pytest

from dsakit.stacks import (
    EmptyStackError,
    Stack,
    StackOverflowError,
    TwoStacks,
    is_balanced,
    next_greater_elements,
    trapped_water,
)


def test_stack_is_last_in_first_out():
    items = list(range(12))
    stack = Stack()
    for item in items:
        stack.push(item)
    assert len(stack) == len(items)
    assert stack.top() == items[-1]
    assert [stack.pop() for _ in items] == items[::-1]
    assert stack.is_empty()


def test_stack_iterates_top_first():
    stack = Stack(["x", "y", "z"])
    assert list(stack) == ["z", "y", "x"]


def test_empty_stack_raises():
    stack = Stack()
    with pytest.raises(EmptyStackError):
        stack.pop()
    with pytest.raises(EmptyStackError):
        stack.top()


def test_two_stacks_are_independent():
    stacks = TwoStacks(4)
    stacks.push1(10)
    stacks.push1(20)
    stacks.push2(30)
    assert stacks.first() == [20, 10]
    assert stacks.second() == [30]
    assert stacks.pop1() == 20
    assert stacks.pop2() == 30
    assert stacks.first() == [10]
    assert stacks.second() == []


def test_two_stacks_share_capacity():
    stacks = TwoStacks(3)
    stacks.push1(1)
    stacks.push2(2)
    stacks.push2(3)
    assert len(stacks) == stacks.capacity
    with pytest.raises(StackOverflowError):
        stacks.push1(4)
    with pytest.raises(StackOverflowError):
        stacks.push2(4)


def test_two_stacks_underflow():
    stacks = TwoStacks(2)
    with pytest.raises(EmptyStackError):
        stacks.pop1()
    with pytest.raises(EmptyStackError):
        stacks.pop2()


def test_two_stacks_negative_capacity():
    with pytest.raises(ValueError):
        TwoStacks(-1)


@pytest.mark.parametrize("text", ["()[{}()]", "", "([]{})", "{[()]}"])
def test_balanced(text):
    assert is_balanced(text)


@pytest.mark.parametrize("text", ["(", ")", "(]", "([)]", "(a)", "(()"])
def test_not_balanced(text):
    assert not is_balanced(text)


def test_next_greater_elements_example():
    assert next_greater_elements([5, 7, 1, 2, 6, 0]) == [7, -1, 2, 6, 7, 5]


def test_next_greater_elements_invariants():
    nums = [3, 8, 1, 8, 4, 2, 9, 0]
    result = next_greater_elements(nums)
    assert len(result) == len(nums)
    for value, greater in zip(nums, result):
        if value == max(nums):
            assert greater == -1
        else:
            assert greater in nums
            assert greater > value


def test_trapped_water_example():
    assert trapped_water([3, 0, 0, 2, 0, 4]) == [0, 3, 3, 1, 3, 0]


def test_trapped_water_monotonic_holds_none():
    heights = [1, 2, 3, 5, 8]
    assert trapped_water(heights) == [0, 0, 0, 0, 0]
    assert trapped_water(heights[::-1]) == [0, 0, 0, 0, 0]


def test_trapped_water_never_exceeds_walls():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    water = trapped_water(heights)
    assert len(water) == len(heights)
    assert all(w >= 0 for w in water)
    assert all(w + h <= max(heights) for w, h in zip(water, heights))
    assert water[0] == water[-1] == 0