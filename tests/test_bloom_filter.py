import pytest

from dsworkbench.bloom_filter import BloomFilter


def test_default_size_is_ten_thousand():
    assert BloomFilter().size == 10000


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_rejected(size):
    with pytest.raises(ValueError):
        BloomFilter(size)


def test_empty_filter_contains_nothing():
    bloom = BloomFilter()
    assert all(word not in bloom for word in ("apple", "", "zebra"))


def test_added_items_are_always_reported():
    bloom = BloomFilter(500)
    words = [f"word-{i}" for i in range(300)]
    for word in words:
        bloom.add(word)
    assert all(word in bloom for word in words)


def test_sparse_filter_rejects_unadded_item():
    bloom = BloomFilter()
    bloom.add("apple")
    assert "apple" in bloom
    assert "banana" not in bloom


def test_single_bit_filter_reports_everything_once_used():
    bloom = BloomFilter(1)
    assert "anything" not in bloom
    bloom.add("a")
    assert "completely different" in bloom


def test_non_string_is_not_contained():
    bloom = BloomFilter(1)
    bloom.add("a")
    assert 42 not in bloom


def test_positions_stable_across_instances():
    first = BloomFilter(64)
    second = BloomFilter(64)
    first.add("stable")
    second.add("stable")
    assert first._bits == second._bits