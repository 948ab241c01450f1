import pytest

from dsakit.hashing import DoubleHashingTable, LinearProbingTable, find_pair

LINEAR_KEYS = [26, 30, 45, 23, 25, 43, 74, 19, 29]
DOUBLE_KEYS = [5, 25, 15, 35, 95]


def test_linear_probing_example_layout():
    table = LinearProbingTable(keys=LINEAR_KEYS)
    assert table.slots == (30, 29, None, 23, 43, 45, 26, 25, 74, 19)


def test_linear_probing_search_finds_every_key():
    table = LinearProbingTable(keys=LINEAR_KEYS)
    for key in LINEAR_KEYS:
        assert table.slots[table.search(key)] == key
        assert key in table
    assert len(table) == len(LINEAR_KEYS)


def test_linear_probing_missing_key():
    table = LinearProbingTable(keys=LINEAR_KEYS)
    assert table.search(35) == -1
    assert 35 not in table


def test_linear_probing_full_table_rejects_insert():
    table = LinearProbingTable(size=3, keys=[1, 2, 3])
    with pytest.raises(ValueError):
        table.insert(4)


def test_insert_returns_slot():
    table = LinearProbingTable()
    slot = table.insert(42)
    assert table.slots[slot] == 42
    assert table.search(42) == slot


def test_double_hashing_search_finds_every_key():
    table = DoubleHashingTable(keys=DOUBLE_KEYS)
    for key in DOUBLE_KEYS:
        assert table.slots[table.search(key)] == key
    assert len(table) == len(DOUBLE_KEYS)


def test_double_hashing_example_slot():
    table = DoubleHashingTable(keys=DOUBLE_KEYS)
    assert table.search(25) == 7


def test_double_hashing_missing_key():
    table = DoubleHashingTable(keys=DOUBLE_KEYS)
    assert table.search(45) == -1


def test_double_hashing_unreachable_slots_raise():
    table = DoubleHashingTable(keys=[5, 15, 25, 35, 45])
    with pytest.raises(ValueError):
        table.insert(55)


@pytest.mark.parametrize("size", [0, -2])
def test_size_must_be_positive(size):
    with pytest.raises(ValueError):
        LinearProbingTable(size=size)
    with pytest.raises(ValueError):
        DoubleHashingTable(size=size)


def test_prime_must_be_positive():
    with pytest.raises(ValueError):
        DoubleHashingTable(prime=0)


def test_find_pair_example():
    assert find_pair([8, 7, 2, 5, 3, 1], 10) == (8, 2)


def test_find_pair_sums_to_target():
    nums = [4, 11, 6, 9, 1]
    pair = find_pair(nums, 15)
    assert sum(pair) == 15
    assert all(n in nums for n in pair)


def test_find_pair_not_found():
    assert find_pair([1, 2, 3], 100) is None
    assert find_pair([], 0) is None