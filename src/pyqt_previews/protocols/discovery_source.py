"""Discovery source protocol for pluggable preview lookup.

Allows applications to provide their own preview discovery without
pyqt-previews depending on how previews are declared or located.
"""

from typing import Protocol, Optional, Sequence

from pyqt_previews.core.models import PreviewDescriptor


class PreviewDiscoverySource(Protocol):
    """Protocol for objects that locate preview families.

    Must be callable once per discovery cycle and return a stable, finite
    list for the duration of that cycle.

    Example:
        from pyqt_previews.protocols import register_discovery_source

        class StaticSource:
            def discover_previews(self, included=None, excluded=None):
                return [PreviewDescriptor("CardView", instance_count=2)]

        register_discovery_source(StaticSource())
    """

    def discover_previews(self, included: Optional[Sequence[str]] = None,
                          excluded: Optional[Sequence[str]] = None) -> Sequence[PreviewDescriptor]:
        """Discover preview families.

        Args:
            included: Names or patterns to keep, None keeps everything
            excluded: Names or patterns to drop

        Returns:
            Descriptors in a deterministic order
        """
        ...


# Global discovery source (set by application)
_discovery_source: Optional[PreviewDiscoverySource] = None


def register_discovery_source(source: Optional[PreviewDiscoverySource]) -> None:
    """Register a discovery source implementation.

    Args:
        source: Object implementing PreviewDiscoverySource, or None to unregister
    """
    global _discovery_source
    _discovery_source = source


def get_discovery_source() -> Optional[PreviewDiscoverySource]:
    """Get the registered discovery source.

    Returns:
        Registered source or None if not registered
    """
    return _discovery_source
