"""
Collaborator protocols and configuration.

Pluggable seams between the dispatch core and the application: where
previews come from, how they are rendered, and how the pipeline is configured.
"""

from .preview_config import PreviewConfig, set_preview_config, get_preview_config
from .discovery_source import PreviewDiscoverySource, register_discovery_source, get_discovery_source
from .renderer import PreviewRenderer

__all__ = [
    "PreviewConfig",
    "set_preview_config",
    "get_preview_config",
    "PreviewDiscoverySource",
    "register_discovery_source",
    "get_discovery_source",
    "PreviewRenderer",
]
