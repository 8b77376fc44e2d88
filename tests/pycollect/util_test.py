import pytest

from pycollect.util import partition


def test_partition():
    assert [(1, 2, 3, 4)] == list(partition((1, 2, 3, 4), 5))
    assert [(1, 2, 3, 4)] == list(partition((1, 2, 3, 4), 4))
    assert [(1, 2, 3), (4,)] == list(partition((1, 2, 3, 4), 3))
    assert [(1, 2), (3, 4)] == list(partition((1, 2, 3, 4), 2))
    assert [(1,), (2,), (3,), (4,)] == list(partition((1, 2, 3, 4), 1))


def test_partition_keeps_slice_type():
    assert [[1, 2], [3]] == list(partition([1, 2, 3], 2))


def test_partition_empty():
    assert [] == list(partition((), 3))


@pytest.mark.parametrize("n", [0, -1])
def test_partition_requires_positive_size(n: int):
    with pytest.raises(ValueError):
        list(partition((1, 2, 3), n))
