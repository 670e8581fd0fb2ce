# hunkforge/utils/iterators.py
from typing import Iterable, TypeVar

T = TypeVar("T")


def uniform(iterable: Iterable[T]) -> bool:
    """
    True when every element equals the first. An empty iterable is uniform.

    Short-circuits on the first mismatch and never materializes the input,
    so chained or unbounded iterators are fine.
    """
    it = iter(iterable)
    for first in it:
        return all(e == first for e in it)
    return True
