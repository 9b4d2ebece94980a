"""
Inclusion / exclusion filtering for discovered previews.

Entries are either literal names or regular expressions. A name matches an
entry when it is equal to it or when the entry, compiled as a regex, matches
the whole name. Entries that are not valid regexes only match literally.

An entry that matches nothing is not an error: it simply contributes nothing
to the result. Callers that own reporting can ask for such entries through
``PreviewFilter.unmatched_inclusions``.
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@lru_cache(maxsize=256)
def _compile(entry: str) -> Optional[re.Pattern]:
    try:
        return re.compile(entry)
    except re.error as e:
        logger.debug(f"Filter entry {entry!r} is not a valid pattern, matching literally ({e})")
        return None


def matches_name(name: str, entry: str) -> bool:
    """Check one name against one filter entry, literally or as a full regex match."""
    if name == entry:
        return True
    pattern = _compile(entry)
    return pattern is not None and pattern.fullmatch(name) is not None


def matches_any(name: str, entries: Iterable[str]) -> bool:
    """Check a name against every entry, True on the first match."""
    return any(matches_name(name, entry) for entry in entries)


@dataclass(frozen=True)
class PreviewFilter:
    """Inclusion and exclusion lists supplied by a test class.

    Attributes:
        included: Names or patterns to keep. None keeps everything.
        excluded: Names or patterns to drop, applied after inclusion.
    """

    included: Optional[Sequence[str]] = None
    excluded: Optional[Sequence[str]] = None

    @property
    def is_empty(self) -> bool:
        return self.included is None and not self.excluded

    def is_included(self, name: str) -> bool:
        return self.included is None or matches_any(name, self.included)

    def is_excluded(self, name: str) -> bool:
        return bool(self.excluded) and matches_any(name, self.excluded)

    def keeps(self, name: str) -> bool:
        """Inclusion first, then exclusion wins."""
        return self.is_included(name) and not self.is_excluded(name)

    def apply(self, items: Sequence[T], name_of: Callable[[T], str]) -> List[T]:
        """Return the kept items in their original order."""
        if self.is_empty:
            return list(items)
        return [item for item in items if self.keeps(name_of(item))]

    def unmatched_inclusions(self, names: Iterable[str]) -> List[str]:
        """Inclusion entries that match none of ``names``."""
        if self.included is None:
            return []
        names = list(names)
        return [
            entry for entry in self.included
            if not any(matches_name(name, entry) for name in names)
        ]
