"""
Qt rendering for previews.

Requires PyQt6 and a QApplication; rendering runs on the GUI thread.
"""

from .layout import LayoutRenderer, LayoutResult, ensure_application, force_layout, host_widget

__all__ = [
    "LayoutRenderer",
    "LayoutResult",
    "ensure_application",
    "force_layout",
    "host_widget",
]
