"""
pytest plugin synthesizing one test item per discovered preview.

Concrete PreviewBaseTest subclasses defined in a test module are collected
by PreviewSuite instead of pytest's own class collector. Collecting a suite
runs one discovery cycle for that class: its registry is rebuilt, and every
generated identifier becomes a PreviewItem. Running an item creates a fresh
suite instance and dispatches the item's identifier to it.

Each suite owns its registry and dispatcher, so suites in the same session
never see each other's previews.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
from typing import Iterator, Optional

import pytest

from pyqt_previews.core.dispatcher import PreviewDispatcher
from pyqt_previews.core.exceptions import PreviewError
from pyqt_previews.core.registry import PreviewRegistry
from pyqt_previews.protocols.preview_config import PreviewConfig, get_preview_config
from pyqt_previews.testing.base_test import PreviewBaseTest

logger = logging.getLogger(__name__)

preview_config_key = pytest.StashKey[PreviewConfig]()

PREVIEW_MARKER = "preview"


def pytest_addoption(parser):
    group = parser.getgroup("previews", "preview test generation")
    group.addoption(
        "--preview-device",
        action="store",
        dest="preview_device",
        default=None,
        help="Target device name; previews constrained to other devices are skipped.",
    )
    group.addoption(
        "--preview-positional-fallback",
        action="store_true",
        dest="preview_positional_fallback",
        default=False,
        help="Resolve unregistered preview identifiers by their trailing counter (legacy).",
    )
    parser.addini("preview_device", "Target device name for preview tests.", default=None)
    parser.addini(
        "preview_positional_fallback",
        "Resolve unregistered preview identifiers by their trailing counter (legacy).",
        type="bool",
        default=False,
    )
    parser.addini(
        "preview_sort_identifiers",
        "Naturally sort preview test identifiers.",
        type="bool",
        default=True,
    )


def build_preview_config(config: pytest.Config) -> PreviewConfig:
    """Layer command-line and ini options over the application's PreviewConfig."""
    base = get_preview_config()
    device = config.getoption("preview_device") or config.getini("preview_device") or base.device
    return dataclasses.replace(
        base,
        device=device,
        allow_positional_fallback=(
            base.allow_positional_fallback
            or config.getoption("preview_positional_fallback")
            or config.getini("preview_positional_fallback")
        ),
        sort_identifiers=base.sort_identifiers and config.getini("preview_sort_identifiers"),
    )


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers", f"{PREVIEW_MARKER}: test synthesized from a discovered preview"
    )
    config.stash[preview_config_key] = build_preview_config(config)


def is_preview_suite(collector: pytest.Collector, obj: object) -> bool:
    """True for concrete PreviewBaseTest subclasses defined in the collected module."""
    if not inspect.isclass(obj) or not issubclass(obj, PreviewBaseTest):
        return False
    if inspect.isabstract(obj):
        return False
    if obj.__module__.split(".")[0] == __name__.split(".")[0]:
        return False
    if not isinstance(collector, pytest.Module):
        return False
    # Suites imported from another module are collected there
    return obj.__module__ == collector.obj.__name__


@pytest.hookimpl(tryfirst=True)
def pytest_pycollect_makeitem(collector, name, obj):
    if is_preview_suite(collector, obj):
        return PreviewSuite.from_parent(collector, name=name, obj=obj)
    return None


class PreviewSuite(pytest.Class):
    """Collector for one PreviewBaseTest subclass."""

    registry: Optional[PreviewRegistry] = None
    dispatcher: Optional[PreviewDispatcher] = None

    def collect(self) -> Iterator["PreviewItem"]:
        preview_config = self.config.stash.get(preview_config_key, None) or get_preview_config()
        registry = PreviewRegistry(owner=self.obj.__qualname__)

        identifiers = self.obj.collect_identifiers(registry, preview_config)

        self.registry = registry
        self.dispatcher = PreviewDispatcher(
            registry, allow_positional_fallback=preview_config.allow_positional_fallback
        )
        for identifier in identifiers:
            yield PreviewItem.from_parent(self, name=identifier, identifier=identifier)


class PreviewItem(pytest.Item):
    """One synthesized, zero-argument preview test."""

    def __init__(self, *, identifier: str, **kwargs):
        super().__init__(**kwargs)
        self.identifier = identifier
        self.add_marker(PREVIEW_MARKER)

    @property
    def suite(self) -> PreviewSuite:
        return self.parent

    def runtest(self) -> None:
        target = self.suite.obj()
        self.suite.dispatcher.dispatch(self.identifier, target)

    def repr_failure(self, excinfo, style=None):
        if isinstance(excinfo.value, PreviewError):
            return f"{self.identifier}: {excinfo.value}"
        return super().repr_failure(excinfo, style=style)

    def reportinfo(self):
        return self.path, 0, f"{self.suite.name}::{self.identifier}"
