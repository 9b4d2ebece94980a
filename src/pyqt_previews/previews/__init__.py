"""
Preview declaration and discovery.

Applications declare previews with PreviewProvider subclasses or the
@preview decorator; find_previews() turns the registered declarations into
filtered PreviewType families.
"""

from .provider import (
    Preview,
    PreviewProvider,
    PreviewProviderMeta,
    FunctionPreviewSource,
    preview,
    registered_preview_sources,
    clear_preview_providers,
    PREVIEW_SOURCES,
)
from .preview_type import PreviewType
from .find_previews import find_previews, import_preview_modules
from .devices import DeviceProfile, BUILTIN_DEVICES, get_device_profile

__all__ = [
    "Preview",
    "PreviewProvider",
    "PreviewProviderMeta",
    "FunctionPreviewSource",
    "preview",
    "registered_preview_sources",
    "clear_preview_providers",
    "PREVIEW_SOURCES",
    "PreviewType",
    "find_previews",
    "import_preview_modules",
    "DeviceProfile",
    "BUILTIN_DEVICES",
    "get_device_profile",
]
