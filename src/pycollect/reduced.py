from typing import Any, Generic, TypeVar

import attr

T = TypeVar("T")


@attr.frozen
class Reduced(Generic[T]):
    """Box returned from a reducing function to end a fold early. The fold yields
    the boxed value without visiting any further elements."""

    value: T

    def deref(self) -> T:
        return self.value


def reduced(value: T) -> Reduced[T]:
    return Reduced(value)


def is_reduced(o: Any) -> bool:
    return isinstance(o, Reduced)
