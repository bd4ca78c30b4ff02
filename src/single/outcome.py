import dataclasses as D
from enum import StrEnum
from typing import Callable, Literal, NoReturn, TypeVar

U = TypeVar("U")


class SingleError(ValueError):
    """Raised when an iterable asked for its sole element is empty or has several."""

    def __init__(self, kind: "Error") -> None:
        super().__init__(str(kind))
        self.kind = kind


class Error(StrEnum):
    """Why an iterable does not have a single element.

    Member values are the error descriptions and must stay stable.
    """

    NoElements = "Called single() on empty iterator"
    MultipleElements = "Called single() on multiple-element iterator"

    def is_ok(self) -> Literal[False]:
        return False

    def unwrap(self) -> NoReturn:
        raise SingleError(self) from None

    def unwrap_or[T](self, default: T) -> T:
        return default

    def unwrap_or_else[T](self, default_fn: Callable[[], T]) -> T:
        return default_fn()


@D.dataclass(frozen=True)
class Ok[U]:
    value: U

    def is_ok(self) -> Literal[True]:
        return True

    def unwrap(self) -> U:
        return self.value

    def unwrap_or(self, default: U) -> U:
        return self.value

    def unwrap_or_else(self, default_fn: Callable[[], U]) -> U:
        return self.value


Outcome = Ok[U] | Error
