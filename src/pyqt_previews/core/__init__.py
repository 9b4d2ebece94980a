"""
Core discovery-to-dispatch pipeline.

Pure Python with no Qt dependency: filtering, identifier generation, the
identifier registry and the dispatcher.
"""

from .models import PreviewDescriptor, ResolvedInstance, DEFAULT_ORIENTATION
from .exceptions import PreviewError, UnregisteredIdentifier, IndexOutOfRange, PreviewTypeNotFound
from .filters import PreviewFilter, matches_name, matches_any
from .registry import PreviewRegistry, RegistryState, parse_counter
from .identifiers import IdentifierGenerator, format_identifier, passes_device_gate
from .dispatcher import DispatchablePreviewTest, PreviewDispatcher
from .sort_utils import natural_sort

__all__ = [
    "PreviewDescriptor",
    "ResolvedInstance",
    "DEFAULT_ORIENTATION",
    "PreviewError",
    "UnregisteredIdentifier",
    "IndexOutOfRange",
    "PreviewTypeNotFound",
    "PreviewFilter",
    "matches_name",
    "matches_any",
    "PreviewRegistry",
    "RegistryState",
    "parse_counter",
    "IdentifierGenerator",
    "format_identifier",
    "passes_device_gate",
    "DispatchablePreviewTest",
    "PreviewDispatcher",
    "natural_sort",
]
