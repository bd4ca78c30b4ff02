from itertools import islice
from typing import Iterable


def probe[U](i: Iterable[U], n: int) -> tuple[U, ...]:
    """Returns at most `n` leading elements, advancing `i` no more than `n` times."""
    return tuple(islice(i, n))
