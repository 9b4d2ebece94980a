"""
Identifier -> preview instance registry.

One registry exists per test class. It is rebuilt from scratch by every
discovery cycle and is read-only while the cycle's tests run.

States:
- EMPTY: initial, and after clear()
- POPULATED: after rebuild()

A rebuild builds the new mapping off to the side and swaps it in under the
same lock lookups take, so a dispatch observes either the previous cycle or
the new one, never a partially populated registry.
"""

import logging
import re
import threading
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from .models import ResolvedInstance

logger = logging.getLogger(__name__)

_TRAILING_COUNTER = re.compile(r"-(\d+)$")


class RegistryState(Enum):
    EMPTY = "empty"
    POPULATED = "populated"


def parse_counter(identifier: str) -> Optional[int]:
    """Extract the trailing cycle counter from an identifier, None if absent."""
    match = _TRAILING_COUNTER.search(identifier)
    return int(match.group(1)) if match else None


class PreviewRegistry:
    """Authoritative identifier -> ResolvedInstance mapping for one cycle."""

    def __init__(self, owner: Optional[str] = None):
        """
        Args:
            owner: Label of the test class owning this registry, used in messages
        """
        self.owner = owner
        self._lock = threading.RLock()
        self._entries: Dict[str, ResolvedInstance] = {}
        self._instances: List[ResolvedInstance] = []
        self._state = RegistryState.EMPTY

    @property
    def state(self) -> RegistryState:
        return self._state

    def clear(self) -> None:
        """Discard all entries and return to EMPTY."""
        with self._lock:
            self._entries = {}
            self._instances = []
            self._state = RegistryState.EMPTY

    def rebuild(self, entries: Iterable[Tuple[str, ResolvedInstance]]) -> None:
        """Replace the registry contents with one cycle's entries.

        Args:
            entries: (identifier, ResolvedInstance) pairs in generation order

        Raises:
            ValueError: If two entries share an identifier
        """
        staged: Dict[str, ResolvedInstance] = {}
        instances: List[ResolvedInstance] = []
        for identifier, resolved in entries:
            if identifier in staged:
                raise ValueError(
                    f"Duplicate preview identifier {identifier!r} for {self.owner or 'registry'}"
                )
            staged[identifier] = resolved
            instances.append(resolved)

        with self._lock:
            self._entries = staged
            self._instances = instances
            self._state = RegistryState.POPULATED

        logger.debug(f"Registry {self.owner}: populated with {len(staged)} previews")

    def lookup(self, identifier: str) -> Optional[ResolvedInstance]:
        """Exact-match lookup, None when the identifier was not registered."""
        with self._lock:
            return self._entries.get(identifier)

    def resolve_positional(self, identifier: str) -> Optional[ResolvedInstance]:
        """Legacy lookup by the identifier's trailing counter.

        Resolves against the flat, generation-ordered list of this cycle's
        instances. Only meant as an opt-in compatibility path: it can hide a
        desynchronized registry.
        """
        position = parse_counter(identifier)
        if position is None:
            return None
        with self._lock:
            if position < len(self._instances):
                return self._instances[position]
        return None

    def identifiers(self) -> List[str]:
        with self._lock:
            return list(self._entries)

    def instances(self) -> List[ResolvedInstance]:
        with self._lock:
            return list(self._instances)

    def __contains__(self, identifier: object) -> bool:
        with self._lock:
            return identifier in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __repr__(self) -> str:
        return f"PreviewRegistry(owner={self.owner!r}, state={self._state.value}, entries={len(self)})"
