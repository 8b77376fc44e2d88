import logging
from collections.abc import Iterable, Iterator
from typing import Any, Callable, Optional, TypeVar, overload

from pyrsistent import PVector, pvector

from pycollect.interfaces import (
    ICounted,
    IPersistentCollection,
    IReduce,
    ISequential,
    Predicate,
    ReduceFunction,
    seq_equals,
)
from pycollect.logconfig import TRACE
from pycollect.reduced import Reduced
from pycollect.util import partition

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

T_reduce = TypeVar("T_reduce")
V_contra = TypeVar("V_contra", contravariant=True)


class Collection(IReduce, IPersistentCollection[T], ICounted, ISequential):
    """An ordered, immutable collection of values. Delegates internally to a
    pyrsistent.PVector object.

    Transformations such as `filter` and `map` never modify the receiver. Each one
    returns a new Collection, so calls may be chained:

        >>> Collection([1, 4, 8, 10, 20]).filter(lambda i: i >= 5).all()
        [8, 10, 20]

    Collections may be constructed from any iterable. The `collection()` and `c()`
    factory functions below are provided as shorthand."""

    __slots__ = ("_inner",)

    def __init__(self, members: Iterable[T] = ()) -> None:
        self._inner: "PVector[T]" = (
            members if isinstance(members, PVector) else pvector(members)
        )

    def __contains__(self, item):
        return item in self._inner

    def __eq__(self, other):
        if self is other:
            return True
        if isinstance(other, Collection) and len(self) != len(other):
            return False
        return seq_equals(self, other)

    @overload
    def __getitem__(self, item: int) -> T: ...

    @overload
    def __getitem__(self, item: slice) -> "Collection[T]": ...

    def __getitem__(self, item):
        if isinstance(item, slice):
            return Collection(self._inner[item])
        return self._inner[item]

    def __hash__(self):
        return hash(self._inner)

    def __iter__(self) -> Iterator[T]:
        yield from self._inner

    def __len__(self):
        return len(self._inner)

    def __repr__(self):
        return f"Collection({list(self._inner)!r})"

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._inner)

    def all(self) -> list[T]:
        return list(self._inner)

    def count(self) -> int:
        return len(self._inner)

    def is_empty(self) -> bool:
        return len(self._inner) == 0

    def is_not_empty(self) -> bool:
        return len(self._inner) > 0

    def cons(self, *elems: T) -> "Collection[T]":
        e = self._inner.evolver()
        for elem in elems:
            e.append(elem)
        return Collection(e.persistent())

    def empty(self) -> "Collection[T]":
        return EMPTY

    def filter(self, predicate: Optional[Predicate[T]] = None) -> "Collection[T]":
        """Return a new Collection holding only the elements for which `predicate`
        returns a truthy value, in their original order.

        If no predicate is given, falsey elements are removed. Any exception raised
        by the predicate propagates to the caller."""
        if predicate is None:
            predicate = bool
        return Collection(pvector(elem for elem in self._inner if predicate(elem)))

    def reject(self, predicate: Predicate[T]) -> "Collection[T]":
        """Return a new Collection without the elements for which `predicate`
        returns a truthy value."""
        return Collection(
            pvector(elem for elem in self._inner if not predicate(elem))
        )

    def map(self, f: Callable[[T], U]) -> "Collection[U]":
        return Collection(pvector(map(f, self._inner)))

    @overload
    def reduce(self, f: ReduceFunction[T_reduce, V_contra]) -> T_reduce: ...

    @overload
    def reduce(  # pylint: disable=arguments-differ
        self, f: ReduceFunction[T_reduce, V_contra], init: T_reduce
    ) -> T_reduce: ...

    def reduce(self, f, init=IReduce.REDUCE_SENTINEL):
        """Fold the collection from left to right with `f`.

        If `init` is not given, the first element is used as the initial value and
        an empty collection returns the result of calling `f` with no arguments. If
        `f` returns a `Reduced` value, the fold stops and the wrapped value is
        returned."""
        if init is IReduce.REDUCE_SENTINEL:
            if len(self) == 0:
                return f()
            init = self._inner[0]
            items = self._inner[1:]
        else:
            items = self._inner

        for idx, item in enumerate(items):
            init = f(init, item)
            if isinstance(init, Reduced):
                logger.log(TRACE, "Reduction stopped early after %d step(s)", idx + 1)
                return init.deref()
        return init

    def first(
        self, predicate: Optional[Predicate[T]] = None, default: Optional[T] = None
    ) -> Optional[T]:
        if predicate is None:
            return self._inner[0] if len(self._inner) > 0 else default
        return next((elem for elem in self._inner if predicate(elem)), default)

    def last(
        self, predicate: Optional[Predicate[T]] = None, default: Optional[T] = None
    ) -> Optional[T]:
        if predicate is None:
            return self._inner[-1] if len(self._inner) > 0 else default
        return next(
            (elem for elem in reversed(self._inner) if predicate(elem)), default
        )

    def take(self, n: int) -> "Collection[T]":
        """Return the first `n` elements, or the last `abs(n)` elements if `n` is
        negative."""
        if n < 0:
            return Collection(self._inner[n:])
        return Collection(self._inner[:n])

    def chunk(self, size: int) -> "Collection[Collection[T]]":
        """Split the collection into a Collection of Collections of at most `size`
        elements each."""
        return Collection(
            pvector(Collection(group) for group in partition(self._inner, size))
        )

    def contains(self, value: T) -> bool:
        """Return True if `value` is equal to an element of this collection.

        Callables are compared by equality like any other value. Use `some` to test
        elements against a predicate."""
        return value in self._inner

    def some(self, predicate: Predicate[T]) -> bool:
        """Return True if any element satisfies `predicate`."""
        return any(predicate(elem) for elem in self._inner)


EMPTY: Collection[Any] = Collection(pvector(()))


def collection(members: Iterable[T]) -> Collection[T]:
    """Creates a new collection."""
    return Collection(members)


def c(*members: T) -> Collection[T]:  # noqa
    """Creates a new collection from members."""
    return Collection(members)
