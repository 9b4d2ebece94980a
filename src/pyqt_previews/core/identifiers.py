"""
Identifier generation for discovered previews.

Each retained preview instance gets one identifier of the form

    {orientation}-{display_name}-{j}-{i}

where ``j`` is the instance index inside its own family and ``i`` is a counter
running across the whole discovery cycle. The counter alone makes every
identifier of a cycle unique, even when orientation, name and ``j`` repeat.

Instances constrained to a device other than the current one are skipped:
they get no identifier, no registry entry, and do not advance the counter.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from .models import DEFAULT_ORIENTATION, PreviewDescriptor, ResolvedInstance
from .registry import PreviewRegistry
from .sort_utils import natural_sort

logger = logging.getLogger(__name__)


def format_identifier(orientation: str, display_name: str, index: int, counter: int) -> str:
    return f"{orientation}-{display_name}-{index}-{counter}"


def passes_device_gate(descriptor: PreviewDescriptor, index: int,
                       current_device: Optional[str]) -> bool:
    """True if the instance may run on the current device.

    With no current device every instance passes. Otherwise an instance passes
    when it has no device constraint or is constrained to the current device.
    """
    if not current_device:
        return True
    device = descriptor.device_at(index)
    return not device or device == current_device


class IdentifierGenerator:
    """Expands descriptors into identifiers and populates a registry.

    Example:
        registry = PreviewRegistry(owner="CardTests")
        generator = IdentifierGenerator(registry)
        generator.generate([PreviewDescriptor("CardView", instance_count=2)])
        # ['portrait-CardView-0-0', 'portrait-CardView-1-1']
    """

    def __init__(self, registry: PreviewRegistry, sort_identifiers: bool = True,
                 default_orientation: str = DEFAULT_ORIENTATION):
        self.registry = registry
        self.sort_identifiers = sort_identifiers
        self.default_orientation = default_orientation

    def expand(self, descriptors: Sequence[PreviewDescriptor],
               current_device: Optional[str] = None) -> List[Tuple[str, ResolvedInstance]]:
        """Pure expansion step: (identifier, instance) pairs in generation order."""
        entries: List[Tuple[str, ResolvedInstance]] = []
        counter = 0
        for descriptor in descriptors:
            display_name = descriptor.label
            for j in range(descriptor.instance_count):
                if not passes_device_gate(descriptor, j, current_device):
                    logger.debug(
                        f"Skipping {descriptor.type_name}[{j}]: device "
                        f"{descriptor.device_at(j)!r} != {current_device!r}"
                    )
                    continue

                orientation = descriptor.orientation_at(j, self.default_orientation)
                identifier = format_identifier(orientation, display_name, j, counter)
                entries.append((identifier, ResolvedInstance(descriptor, j)))
                counter += 1
        return entries

    def generate(self, descriptors: Sequence[PreviewDescriptor],
                 current_device: Optional[str] = None) -> List[str]:
        """Run one discovery cycle's identifier generation.

        The registry's previous contents are discarded and replaced by this
        cycle's entries.

        Args:
            descriptors: Filtered descriptors, in discovery order
            current_device: Target device name, None when not set

        Returns:
            Identifiers of every retained instance, naturally sorted unless
            sort_identifiers is False
        """
        try:
            entries = self.expand(descriptors, current_device)
        except Exception:
            # No stale entries from the previous cycle survive a failed one
            self.registry.clear()
            raise
        self.registry.rebuild(entries)

        identifiers = [identifier for identifier, _ in entries]
        logger.debug(
            f"Generated {len(identifiers)} preview identifiers for {self.registry.owner} "
            f"from {len(descriptors)} families (device={current_device!r})"
        )
        if self.sort_identifiers:
            return natural_sort(identifiers)
        return identifiers
