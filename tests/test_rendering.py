"""Tests for layout-pass rendering."""

import threading

import pytest

from pyqt_previews.core import IndexOutOfRange, PreviewDescriptor, PreviewTypeNotFound, ResolvedInstance
from pyqt_previews.previews import Preview, PreviewType


def _label():
    from PyQt6.QtWidgets import QLabel
    return QLabel("Hello preview")


def test_layout_renderer(qapp):
    """Test LayoutRenderer lays out a hosted widget."""
    from pyqt_previews.rendering import LayoutRenderer

    family = PreviewType(
        "app.Label", "Label",
        (Preview(_label), Preview(_label, device="Phone", orientation="landscape")),
    )

    result = LayoutRenderer(qapp).render(family, 1)

    assert result.device.name == "Phone"
    assert result.orientation == "landscape"
    assert result.size_hint[0] > 0


def test_layout_renderer_rejects_stale_index(qapp):
    from pyqt_previews.rendering import LayoutRenderer

    family = PreviewType("app.Label", "Label", (Preview(_label),))

    with pytest.raises(IndexOutOfRange):
        LayoutRenderer(qapp).render(family, 3)


def test_layout_renderer_requires_widget(qapp):
    from pyqt_previews.rendering import LayoutRenderer

    family = PreviewType("app.Broken", "Broken", (Preview(object),))

    with pytest.raises(TypeError, match="expected a QWidget"):
        LayoutRenderer(qapp).render(family, 0)


def test_layout_renderer_requires_gui_thread(qapp):
    from pyqt_previews.rendering import LayoutRenderer

    family = PreviewType("app.Label", "Label", (Preview(_label),))
    errors = []

    def render():
        try:
            LayoutRenderer(qapp).render(family, 0)
        except RuntimeError as e:
            errors.append(e)

    thread = threading.Thread(target=render)
    thread.start()
    thread.join()

    assert len(errors) == 1


def test_layout_test_resolves_live_family(qapp):
    """PreviewLayoutTest renders the family found by its own discovery."""
    from pyqt_previews.previews import PreviewProvider
    from pyqt_previews.testing import PreviewLayoutTest

    class LabelPreviews(PreviewProvider):
        @classmethod
        def previews(cls):
            return [Preview(_label), Preview(_label, orientation="landscape")]

    class LabelSuite(PreviewLayoutTest):
        pass

    (descriptor,) = LabelSuite.discover_previews()
    result = LabelSuite().test_preview(ResolvedInstance(descriptor, 1))

    assert result.orientation == "landscape"
    assert result.type_name == LabelPreviews.type_name()


def test_layout_test_missing_family(qapp):
    from pyqt_previews.testing import PreviewLayoutTest

    class EmptySuite(PreviewLayoutTest):
        pass

    EmptySuite.discover_previews()
    resolved = ResolvedInstance(PreviewDescriptor("app.Gone", instance_count=1), 0)

    with pytest.raises(PreviewTypeNotFound):
        EmptySuite().test_preview(resolved)


def test_layout_test_stale_family(qapp):
    """A family that shrank since discovery fails with IndexOutOfRange."""
    from pyqt_previews.previews import PreviewProvider
    from pyqt_previews.testing import PreviewLayoutTest

    class Shrinking(PreviewProvider):
        @classmethod
        def previews(cls):
            return [Preview(_label)]

    class ShrinkSuite(PreviewLayoutTest):
        pass

    ShrinkSuite.discover_previews()
    stale = ResolvedInstance(PreviewDescriptor(Shrinking.type_name(), instance_count=2), 1)

    with pytest.raises(IndexOutOfRange):
        ShrinkSuite().test_preview(stale)


def test_layout_test_defaults_to_own_module(qapp):
    """Previews declared in other modules stay out of a suite's default discovery."""
    from pyqt_previews.previews import PreviewProvider
    from pyqt_previews.testing import PreviewLayoutTest

    class Foreign(PreviewProvider):
        __module__ = "another_test_module"

        @classmethod
        def previews(cls):
            return [Preview(_label)]

    class Local(PreviewProvider):
        @classmethod
        def previews(cls):
            return [Preview(_label)]

    class LocalSuite(PreviewLayoutTest):
        pass

    (descriptor,) = LocalSuite.discover_previews()

    assert descriptor.type_name == Local.type_name()


def test_layout_renderer_releases_widgets(qapp):
    """Rendered containers and their widgets are destroyed after the pass."""
    from PyQt6.QtWidgets import QApplication

    from pyqt_previews.rendering import LayoutRenderer

    family = PreviewType("app.Label", "Label", (Preview(_label),))
    renderer = LayoutRenderer(qapp)
    renderer.render(family, 0)
    baseline = len(QApplication.allWidgets())

    for _ in range(20):
        renderer.render(family, 0)

    assert len(QApplication.allWidgets()) == baseline
