"""
Layout pass rendering for previews.

Hosts a preview widget in a container sized to its target device and forces
a layout pass. Nothing is painted or compared: a render succeeds when the
widget can be built and laid out without raising.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PyQt6 import sip
from PyQt6.QtCore import QSize, QThread
from PyQt6.QtWidgets import QApplication, QVBoxLayout, QWidget

from pyqt_previews.core.exceptions import IndexOutOfRange
from pyqt_previews.previews.devices import DeviceProfile, get_device_profile
from pyqt_previews.previews.preview_type import PreviewType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayoutResult:
    """Outcome of one layout pass."""

    type_name: str
    index: int
    device: DeviceProfile
    orientation: str
    size_hint: Tuple[int, int]
    size: Tuple[int, int]


def ensure_application() -> QApplication:
    """Return the running QApplication, creating one if needed."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app


def require_gui_thread(app: QApplication) -> None:
    """Raise RuntimeError unless called on the thread owning the QApplication."""
    if QThread.currentThread() is not app.thread():
        raise RuntimeError(
            "Preview rendering must run on the Qt GUI thread"
        )


def host_widget(widget: QWidget, size: QSize) -> QWidget:
    """Embed a widget in a fixed-size container, the way a window would."""
    container = QWidget()
    layout = QVBoxLayout(container)
    layout.setContentsMargins(0, 0, 0, 0)
    layout.addWidget(widget)
    container.resize(size)
    return container


def force_layout(container: QWidget) -> None:
    """Activate pending layouts and flush the resulting events."""
    container.ensurePolished()
    layout = container.layout()
    if layout is not None:
        layout.invalidate()
        layout.activate()
    container.updateGeometry()
    QApplication.processEvents()


class LayoutRenderer:
    """Renders one instance of a preview family by forcing a layout pass.

    Example:
        renderer = LayoutRenderer()
        result = renderer.render(preview_type, 0)
        print(result.size_hint)
    """

    def __init__(self, app: Optional[QApplication] = None):
        self._app = app

    @property
    def app(self) -> QApplication:
        if self._app is None:
            self._app = ensure_application()
        return self._app

    def render(self, preview_type: PreviewType, index: int) -> LayoutResult:
        """
        Build the widget for ``preview_type.previews[index]`` and lay it out.

        Raises:
            IndexOutOfRange: If index is outside the family's current previews
            RuntimeError: If called off the GUI thread
        """
        if not 0 <= index < len(preview_type.previews):
            raise IndexOutOfRange(preview_type.type_name, index, len(preview_type.previews))

        app = self.app
        require_gui_thread(app)

        selected = preview_type.previews[index]
        device = get_device_profile(selected.device)
        width, height = device.size_for(selected.orientation)

        widget = selected.make_widget()
        if not isinstance(widget, QWidget):
            raise TypeError(
                f"Preview factory for {preview_type.type_name}[{index}] returned "
                f"{type(widget).__name__}, expected a QWidget"
            )

        container = host_widget(widget, QSize(width, height))
        try:
            force_layout(container)
            hint = widget.sizeHint()
            result = LayoutResult(
                type_name=preview_type.type_name,
                index=index,
                device=device,
                orientation=selected.orientation,
                size_hint=(hint.width(), hint.height()),
                size=(widget.width(), widget.height()),
            )
        finally:
            # Deleted now: deferred deletes need a running event loop
            sip.delete(container)

        logger.debug(
            f"Laid out {preview_type.type_name}[{index}] on {device.name} "
            f"({selected.orientation}): hint={result.size_hint} size={result.size}"
        )
        return result
