"""
Test suite base classes.

PreviewBaseTest is Qt-free; PreviewLayoutTest renders through PyQt6.
"""

from .base_test import PreviewBaseTest
from .layout_test import PreviewLayoutTest

__all__ = [
    "PreviewBaseTest",
    "PreviewLayoutTest",
]
