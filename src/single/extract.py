"""Extracting the sole element of an iterable.

Every function here classifies its input by probing at most two elements:

>>> single([0])
0
>>> classify([])
<Error.NoElements: 'Called single() on empty iterator'>
>>> single_or([0, 0], 5)
5

The iterable is consumed; elements past the second are never read, so infinite
iterables are fine.
"""

import dataclasses as D
from typing import Callable, Iterable

from single.outcome import Error, Ok, Outcome
from single.util import probe


def classify[U](iterable: Iterable[U]) -> Outcome[U]:
    match probe(iterable, 2):
        case ():
            return Error.NoElements
        case (element,):
            return Ok(element)
        case _:
            return Error.MultipleElements


def single[U](iterable: Iterable[U]) -> U:
    """Returns the only element of `iterable`.

    Raises `SingleError` if `iterable` is empty or has more than one element.
    """
    return classify(iterable).unwrap()


def single_or[U](iterable: Iterable[U], default: U) -> U:
    return classify(iterable).unwrap_or(default)


def single_or_else[U](iterable: Iterable[U], default_fn: Callable[[], U]) -> U:
    """Like `single_or`, but only calls `default_fn` when there is no single element."""
    return classify(iterable).unwrap_or_else(default_fn)


@D.dataclass
class only[U]:
    """Fluent form of the functions above, e.g. `only(xs).or_else(0)`.

    Each method consumes `iterable` again, so a one-shot iterator only supports
    one call.
    """

    iterable: Iterable[U]

    def outcome(self) -> Outcome[U]:
        return classify(self.iterable)

    def get(self) -> U:
        return single(self.iterable)

    def or_else(self, default: U) -> U:
        return single_or(self.iterable, default)

    def or_else_get(self, default_fn: Callable[[], U]) -> U:
        return single_or_else(self.iterable, default_fn)
