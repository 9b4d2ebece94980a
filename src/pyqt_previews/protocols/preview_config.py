"""Base configuration for preview discovery and dispatch.

Provides hooks for applications and the pytest plugin to customize how
previews are discovered, named and rendered.
"""

import os
from typing import Dict, List, Optional, Tuple
from dataclasses import dataclass, field


@dataclass
class PreviewConfig:
    """Configuration for preview test generation.

    Attributes:
        device: Current target device. Overrides the environment when set.
        device_env_vars: Environment variables read, in order, for the device
        default_orientation: Orientation of instances that declare none
        sort_identifiers: Naturally sort identifiers before handing them to pytest
        allow_positional_fallback: Resolve unknown identifiers by trailing counter
        default_device: Device profile used for rendering unconstrained previews
        custom_devices: Extra device profiles, name -> (width, height) in portrait
    """

    device: Optional[str] = None
    device_env_vars: List[str] = field(
        default_factory=lambda: ["PREVIEW_DEVICE_NAME", "PREVIEW_MODEL_IDENTIFIER"]
    )
    default_orientation: str = "portrait"
    sort_identifiers: bool = True
    allow_positional_fallback: bool = False
    default_device: str = "Desktop"
    custom_devices: Dict[str, Tuple[int, int]] = field(default_factory=dict)

    def current_device(self) -> Optional[str]:
        """Resolve the current target device, None when nothing is set."""
        if self.device:
            return self.device
        for name in self.device_env_vars:
            value = os.environ.get(name)
            if value:
                return value
        return None


# Global config instance (set by application or the pytest plugin)
_preview_config: Optional[PreviewConfig] = None


def set_preview_config(config: Optional[PreviewConfig]) -> None:
    """Set the global preview configuration.

    Args:
        config: PreviewConfig instance, or None to restore defaults
    """
    global _preview_config
    _preview_config = config


def get_preview_config() -> PreviewConfig:
    """Get the current preview configuration.

    Returns:
        Current PreviewConfig or default if not set
    """
    if _preview_config is None:
        return PreviewConfig()
    return _preview_config
