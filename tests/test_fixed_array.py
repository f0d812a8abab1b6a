import pytest

from dsworkbench.fixed_array import FixedArray


def test_new_array_is_zero_filled():
    arr = FixedArray(4)
    assert len(arr) == 4
    assert list(arr) == [0, 0, 0, 0]


def test_set_then_get_round_trip():
    arr = FixedArray(5)
    for index, value in enumerate([7, -3, 42, 0, 9]):
        arr[index] = value
    assert [arr[i] for i in range(5)] == [7, -3, 42, 0, 9]
    assert list(arr) == [7, -3, 42, 0, 9]


def test_overwrite_keeps_size():
    arr = FixedArray(2)
    arr[1] = 10
    arr[1] = 20
    assert arr[1] == 20
    assert len(arr) == 2


@pytest.mark.parametrize("index", [-1, 3, 100])
def test_get_out_of_bounds_raises(index):
    arr = FixedArray(3)
    arr[0] = 4
    with pytest.raises(IndexError):
        _ = arr[index]
    assert list(arr) == [4, 0, 0]
    assert len(arr) == 3


@pytest.mark.parametrize("index", [-1, 3])
def test_set_out_of_bounds_raises_and_leaves_array(index):
    arr = FixedArray(3)
    with pytest.raises(IndexError):
        arr[index] = 5
    assert list(arr) == [0, 0, 0]


def test_empty_array():
    arr = FixedArray(0)
    assert len(arr) == 0
    assert list(arr) == []
    with pytest.raises(IndexError):
        _ = arr[0]


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        FixedArray(-2)


def test_str_joins_values_with_spaces():
    arr = FixedArray(3)
    arr[0] = 1
    arr[2] = 5
    assert str(arr) == "1 0 5"