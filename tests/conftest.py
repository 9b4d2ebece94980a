"""pytest configuration and fixtures for pyqt-previews tests."""

import os

# Headless Qt for CI; must be set before QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from pyqt_previews.previews import clear_preview_providers
from pyqt_previews.protocols import register_discovery_source, set_preview_config

pytest_plugins = ["pytester"]


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def isolated_previews(monkeypatch):
    """Start every test with no registered previews and default config."""
    monkeypatch.delenv("PREVIEW_DEVICE_NAME", raising=False)
    monkeypatch.delenv("PREVIEW_MODEL_IDENTIFIER", raising=False)
    clear_preview_providers()
    set_preview_config(None)
    register_discovery_source(None)
    yield
    clear_preview_providers()
    set_preview_config(None)
    register_discovery_source(None)
