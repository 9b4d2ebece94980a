"""
pyqt-previews: one test per widget preview for PyQt6 applications.

Applications declare previews of their widgets; the library discovers them,
synthesizes one pytest test per preview instance and forces a layout pass on
each, so every preview is executed and reported individually.

Architecture:
- Tier 1 (Core): Pure-Python discovery-to-dispatch pipeline (filters,
  identifier generation, registry, dispatcher)
- Tier 2 (Protocols): Configuration and collaborator protocols
- Tier 3 (Previews): Preview declaration, auto-registration and discovery
- Tier 4 (Rendering / Testing): PyQt6 layout pass, suite base classes and the
  pytest plugin

Key Features:
- Unique, human-readable test identifiers per preview instance
- Name or regex inclusion / exclusion filters per test class
- Target-device gating from the environment or the command line
- Per-class registries, no cross-suite leakage
- Fail-loud dispatch of unknown identifiers
"""

__version__ = "0.1.0"

from .core import (
    PreviewDescriptor,
    ResolvedInstance,
    PreviewError,
    UnregisteredIdentifier,
    IndexOutOfRange,
    PreviewTypeNotFound,
    PreviewFilter,
    PreviewRegistry,
    IdentifierGenerator,
    DispatchablePreviewTest,
    PreviewDispatcher,
)
from .protocols import PreviewConfig, set_preview_config, get_preview_config
from .previews import Preview, PreviewProvider, preview, find_previews

__all__ = [
    "__version__",
    "PreviewDescriptor",
    "ResolvedInstance",
    "PreviewError",
    "UnregisteredIdentifier",
    "IndexOutOfRange",
    "PreviewTypeNotFound",
    "PreviewFilter",
    "PreviewRegistry",
    "IdentifierGenerator",
    "DispatchablePreviewTest",
    "PreviewDispatcher",
    "PreviewConfig",
    "set_preview_config",
    "get_preview_config",
    "Preview",
    "PreviewProvider",
    "preview",
    "find_previews",
]
