import pytest

from dsakit.dp import (
    coin_change_ways,
    fibonacci,
    fibonacci_recursive,
    max_subarray_sum,
    word_break,
)


def test_coin_change_source_example():
    assert coin_change_ways([1, 2, 3], 4) == 4


def test_coin_change_invariants():
    for total in range(10):
        assert coin_change_ways([1], total) == 1
        assert coin_change_ways([3, 1, 2], total) == coin_change_ways([1, 2, 3], total)
    assert coin_change_ways([2], 3) == 0
    assert coin_change_ways([5, 7], 0) == 1


def test_coin_change_errors():
    with pytest.raises(ValueError):
        coin_change_ways([1, 2], -1)
    with pytest.raises(ValueError):
        coin_change_ways([0, 1], 3)


def _brute_max(values):
    return max(
        sum(values[i:j]) for i in range(len(values)) for j in range(i + 1, len(values) + 1)
    )


@pytest.mark.parametrize(
    "values",
    [[1, 2, 3, -2, 5], [-1, -2, -3, -4], [5], [2, -8, 3, -2, 4, -10], [0, 0, -1]],
)
def test_max_subarray_sum_matches_brute_force(values):
    assert max_subarray_sum(values) == _brute_max(values)


def test_max_subarray_sum_empty():
    with pytest.raises(ValueError):
        max_subarray_sum([])


def test_fibonacci_base_and_recurrence():
    assert fibonacci(0) == 1
    assert fibonacci(1) == 1
    for n in range(2, 30):
        assert fibonacci(n) == fibonacci(n - 1) + fibonacci(n - 2)


def test_fibonacci_recursive_agrees():
    for n in range(15):
        assert fibonacci_recursive(n) == fibonacci(n)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-1)
    with pytest.raises(ValueError):
        fibonacci_recursive(-2)


def test_word_break_example():
    words = ["cats", "cat", "and", "sand", "dog"]
    result = word_break(words, "catsanddog")
    assert sorted(result) == ["cat sand dog", "cats and dog"]
    assert result[0] == "cat sand dog"


def test_word_break_invariants():
    words = ["a", "aa", "aaa"]
    result = word_break(words, "aaaa")
    assert len(set(result)) == len(result)
    for sentence in result:
        assert sentence.replace(" ", "") == "aaaa"
        assert all(word in words for word in sentence.split(" "))


def test_word_break_no_split():
    assert word_break(["cat", "dog"], "catdo") == []
    assert word_break(["cat"], "") == []