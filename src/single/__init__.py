from single.extract import classify, only, single, single_or, single_or_else
from single.outcome import Error, Ok, Outcome, SingleError

__all__ = [
    "Error",
    "Ok",
    "Outcome",
    "SingleError",
    "classify",
    "only",
    "single",
    "single_or",
    "single_or_else",
]
