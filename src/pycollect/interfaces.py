import itertools
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sized
from typing import Any, Callable, Final, Optional, Protocol, TypeVar, overload

from typing_extensions import Self

T = TypeVar("T")
U = TypeVar("U")
V_contra = TypeVar("V_contra", contravariant=True)

Predicate = Callable[[T], bool]


class ICounted(Sized, ABC):
    """``ICounted`` is a marker interface for types which can produce their length
    in constant time.

    Collections backed by a persistent vector are ``ICounted``."""

    __slots__ = ()


class ISequential(ABC):
    """``ISequential`` is a marker interface for types whose element order is
    significant.

    Two ``ISequential`` values compare equal when they hold equal elements in the
    same order (see :py:func:`seq_equals`)."""

    __slots__ = ()


class IPersistentCollection(Iterable[T]):
    """``IPersistentCollection`` types never change after construction. Every
    operation which would modify the collection instead returns a new collection,
    leaving the receiver untouched.

    Implementations must return an instance of their own type from each
    transformation, so callers may chain transformations freely."""

    __slots__ = ()

    @abstractmethod
    def all(self) -> list[T]:
        """Return the contents of the collection as a new Python list."""
        raise NotImplementedError()

    @abstractmethod
    def cons(self: Self, *elems: T) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def empty(self: Self) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def filter(self: Self, predicate: Optional[Predicate[T]] = None) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def reject(self: Self, predicate: Predicate[T]) -> Self:
        raise NotImplementedError()

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> "IPersistentCollection[U]":
        raise NotImplementedError()


class ReduceFunction(Protocol[T, V_contra]):
    @overload
    def __call__(self) -> T: ...

    @overload
    def __call__(self, init: T, val: V_contra) -> T: ...

    def __call__(self, *args, **kwargs): ...


class IReduce(ABC):
    """``IReduce`` types define their own implementation of a left fold.

    Reducing functions may return a :py:class:`pycollect.reduced.Reduced` value to
    stop the fold early."""

    REDUCE_SENTINEL: Final = object()

    __slots__ = ()

    @overload
    def reduce(self, f: ReduceFunction[T, V_contra]) -> T: ...

    @overload
    def reduce(self, f: ReduceFunction[T, V_contra], init: T) -> T: ...

    @abstractmethod
    def reduce(self, f, init=REDUCE_SENTINEL):
        raise NotImplementedError()


def seq_equals(s1: ISequential, s2: Any) -> bool:
    """Return True if two sequences contain exactly the same elements in the same
    order. Return False if one sequence is shorter than the other."""
    assert isinstance(s1, ISequential)

    if not isinstance(s2, ISequential):
        return NotImplemented

    sentinel = object()
    for e1, e2 in itertools.zip_longest(s1, s2, fillvalue=sentinel):  # type: ignore[call-overload]
        if e1 is sentinel or e2 is sentinel:
            return False
        if e1 != e2:
            return False
    return True
