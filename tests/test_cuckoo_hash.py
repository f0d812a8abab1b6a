import pytest

from dsworkbench.cuckoo_hash import CuckooHashTable


def test_insert_and_lookup():
    table = CuckooHashTable(11, 8)
    assert table.insert("apple", 3)
    assert table.insert("pear", 4)
    assert table.lookup("apple") == 3
    assert table.lookup("pear") == 4


def test_lookup_missing_raises():
    table = CuckooHashTable(5, 3)
    with pytest.raises(KeyError):
        table.lookup("ghost")


def test_reinsert_updates_value():
    table = CuckooHashTable(5, 3)
    table.insert("k", 1)
    table.insert("k", 2)
    assert table.lookup("k") == 2
    first, second = table.tables()
    assert len(first) + len(second) == 1


def test_remove():
    table = CuckooHashTable(7, 4)
    table.insert("a", 1)
    assert table.remove("a")
    assert not table.remove("a")
    with pytest.raises(KeyError):
        table.lookup("a")


def test_second_table_used_when_first_slot_taken():
    table = CuckooHashTable(1, 0)
    assert table.insert("a", 1)
    assert table.insert("b", 2)
    assert table.tables() == ([("a", 1)], [("b", 2)])


def test_full_table_fails_and_keeps_contents():
    table = CuckooHashTable(1, 5)
    table.insert("a", 1)
    table.insert("b", 2)
    assert table.insert("c", 3) is False
    assert table.lookup("a") == 1
    assert table.lookup("b") == 2
    with pytest.raises(KeyError):
        table.lookup("c")


def test_many_keys_all_retrievable():
    table = CuckooHashTable(64, 32)
    stored = {}
    for number in range(40):
        key = f"key{number}"
        if table.insert(key, number):
            stored[key] = number
    for key, value in stored.items():
        assert table.lookup(key) == value
    first, second = table.tables()
    assert len(first) + len(second) == len(stored)


def test_empty_key_rejected():
    table = CuckooHashTable(3, 1)
    with pytest.raises(ValueError):
        table.insert("", 1)


def test_invalid_size():
    with pytest.raises(ValueError):
        CuckooHashTable(0, 1)