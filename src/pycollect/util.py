from collections.abc import Iterable, Sequence
from typing import TypeVar

T = TypeVar("T")


def partition(coll: Sequence[T], n: int) -> Iterable[Sequence[T]]:
    """Partition `coll` into consecutive slices of size `n`. The final slice holds
    the remaining elements and may be shorter than `n`.

    Slices are taken with `coll[start:stop]`, so the type of each group follows
    the slicing behavior of `coll`."""
    if n < 1:
        raise ValueError(f"Partition size must be a positive integer, not {n}")
    for start in range(0, len(coll), n):
        yield coll[start : start + n]
