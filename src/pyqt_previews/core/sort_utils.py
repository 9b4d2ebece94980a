"""Sorting utilities."""

import re
from typing import Iterable, List, TypeVar

T = TypeVar("T")

_DIGITS = re.compile(r"(\d+)")


def natural_sort(items: Iterable[T]) -> List[T]:
    """Return a naturally sorted list, so ``x-2`` comes before ``x-10``."""
    def sort_key(value: T):
        parts = _DIGITS.split(str(value))
        # Tag each part so ints and strings never compare against each other
        return [(0, int(p), "") if p.isdigit() else (1, 0, p.lower()) for p in parts]

    return sorted(items, key=sort_key)
