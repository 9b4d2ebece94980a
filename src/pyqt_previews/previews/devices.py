"""Device profiles used to size previews during rendering."""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from pyqt_previews.protocols.preview_config import get_preview_config

LANDSCAPE = "landscape"


@dataclass(frozen=True)
class DeviceProfile:
    """Logical screen size of a target device in its natural orientation."""

    name: str
    width: int
    height: int

    def size_for(self, orientation: str) -> Tuple[int, int]:
        """(width, height) for an orientation; landscape swaps the sides."""
        if orientation == LANDSCAPE:
            return self.height, self.width
        return self.width, self.height


BUILTIN_DEVICES: Dict[str, DeviceProfile] = {
    profile.name: profile for profile in (
        DeviceProfile("Desktop", 1280, 800),
        DeviceProfile("Laptop", 1440, 900),
        DeviceProfile("Tablet", 820, 1180),
        DeviceProfile("Phone", 393, 852),
        DeviceProfile("Small Phone", 320, 568),
    )
}


def get_device_profile(name: Optional[str]) -> DeviceProfile:
    """Look up a device profile, falling back to the configured default.

    Custom devices from the config take precedence over built-in ones.
    """
    config = get_preview_config()
    devices = dict(BUILTIN_DEVICES)
    for device_name, (width, height) in config.custom_devices.items():
        devices[device_name] = DeviceProfile(device_name, width, height)

    if name and name in devices:
        return devices[name]
    return devices.get(config.default_device, BUILTIN_DEVICES["Desktop"])
