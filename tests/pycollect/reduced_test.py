import attr
import pytest

from pycollect.reduced import Reduced, is_reduced, reduced


def test_reduced_deref():
    assert 3 == Reduced(3).deref()
    assert None is Reduced(None).deref()


def test_reduced_factory():
    assert Reduced("a") == reduced("a")
    assert is_reduced(reduced("a"))
    assert not is_reduced("a")
    assert not is_reduced(None)


def test_reduced_is_frozen():
    with pytest.raises(attr.exceptions.FrozenInstanceError):
        Reduced(1).value = 2  # type: ignore[misc]
