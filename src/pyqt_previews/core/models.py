"""
Preview data model.

A PreviewDescriptor is the static shape of one discovered preview family: a
named type producing N renderable instances, each with optional device and
orientation metadata. A ResolvedInstance points at one of those instances.

Both are frozen so the registry and the dispatcher can share the snapshot
produced by one discovery cycle.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

DEFAULT_ORIENTATION = "portrait"
NO_DEVICE = ""


@dataclass(frozen=True)
class PreviewDescriptor:
    """Static metadata for one discovered preview family.

    Attributes:
        type_name: Stable identifier of the declaring type, unique per descriptor
        display_name: Human label, falls back to type_name when absent
        devices: Per-instance target device names, index-aligned with instances
        orientations: Per-instance orientations, index-aligned with instances
        instance_count: Number of renderable instances

    ``devices`` and ``orientations`` may be shorter than ``instance_count``.
    Trailing instances have no device constraint and a portrait orientation.
    """

    type_name: str
    display_name: Optional[str] = None
    devices: Tuple[str, ...] = field(default_factory=tuple)
    orientations: Tuple[str, ...] = field(default_factory=tuple)
    instance_count: int = 0

    def __post_init__(self):
        if self.instance_count < 0:
            raise ValueError(
                f"{self.type_name}: instance_count must be >= 0, got {self.instance_count}"
            )
        # Accept any sequence but keep an immutable snapshot
        object.__setattr__(self, "devices", tuple(self.devices))
        object.__setattr__(self, "orientations", tuple(self.orientations))

    @property
    def label(self) -> str:
        """Name used in identifiers."""
        return self.display_name if self.display_name is not None else self.type_name

    def device_at(self, index: int) -> str:
        """Device constraint for an instance, empty string when unconstrained."""
        if 0 <= index < len(self.devices):
            return self.devices[index] or NO_DEVICE
        return NO_DEVICE

    def orientation_at(self, index: int, default: str = DEFAULT_ORIENTATION) -> str:
        """Orientation for an instance, ``default`` past the end of the list."""
        if 0 <= index < len(self.orientations):
            return self.orientations[index]
        return default


@dataclass(frozen=True)
class ResolvedInstance:
    """One instance of a preview family, addressed by its index."""

    descriptor: PreviewDescriptor
    index: int

    def __post_init__(self):
        if not self.fits(self.descriptor.instance_count):
            raise ValueError(
                f"{self.descriptor.type_name}: index {self.index} outside "
                f"0..{self.descriptor.instance_count - 1}"
            )

    def fits(self, instance_count: int) -> bool:
        return 0 <= self.index < instance_count
