"""Tests for preview declaration and discovery."""

import logging
import sys
import types

import pytest

from pyqt_previews.core import PreviewFilter
from pyqt_previews.previews import (
    Preview,
    PreviewProvider,
    PreviewType,
    find_previews,
    preview,
    registered_preview_sources,
)


def _widget():
    return object()


def _card_previews():
    class CardView(PreviewProvider):
        @classmethod
        def previews(cls):
            return [
                Preview(_widget, name="Short card"),
                Preview(_widget, name="Long card", orientation="landscape"),
            ]

    class ButtonView(PreviewProvider):
        display_name = "Button"

        @classmethod
        def previews(cls):
            return [Preview(_widget, device="Phone"), Preview(_widget)]

    return CardView, ButtonView


def test_concrete_providers_auto_register():
    """Providers register in definition order; abstract bases do not."""
    card, button = _card_previews()

    assert registered_preview_sources() == [card, button]
    assert PreviewProvider not in registered_preview_sources()


def test_opt_out_of_registration():
    class Hidden(PreviewProvider):
        _register_preview = False

        @classmethod
        def previews(cls):
            return [Preview(_widget)]

    assert registered_preview_sources() == []


def test_redefinition_overwrites(caplog):
    _card_previews()
    with caplog.at_level(logging.WARNING):
        card, button = _card_previews()

    assert registered_preview_sources() == [card, button]
    assert "already registered" in caplog.text


def test_preview_decorator_registers_function():
    @preview(name="Empty card", device="Tablet", orientation="landscape")
    def empty_card():
        return object()

    (found,) = find_previews()
    descriptor = found.to_descriptor()

    assert found.display_name == "Empty card"
    assert found.type_name.endswith("empty_card")
    assert descriptor.devices == ("Tablet",)
    assert descriptor.orientations == ("landscape",)
    assert descriptor.instance_count == 1
    assert callable(empty_card)


def test_descriptor_from_preview_type():
    card, button = _card_previews()

    descriptors = [t.to_descriptor() for t in find_previews()]

    assert [d.label for d in descriptors] == ["CardView", "Button"]
    assert descriptors[0].type_name == card.type_name()
    assert descriptors[0].orientations == ("portrait", "landscape")
    assert descriptors[1].devices == ("Phone", "")


def test_find_previews_pattern_inclusion():
    """Only families matching an inclusion pattern proceed."""
    _card_previews()

    found = find_previews(included=["Card.*"])

    assert [t.display_name for t in found] == ["CardView"]
    assert len(found[0]) == 2


def test_find_previews_exclusion():
    _card_previews()

    assert [t.display_name for t in find_previews(excluded=["Button"])] == ["CardView"]


def test_instance_level_filtering():
    """Named instances can be included or excluded on their own."""
    _card_previews()

    (included,) = find_previews(included=["Long card"])
    (excluded,) = find_previews(included=["CardView"], excluded=["Short.*"])

    assert [p.name for p in included.previews] == ["Long card"]
    assert [p.name for p in excluded.previews] == ["Long card"]


def test_unmatched_inclusion_logs_and_yields_nothing(caplog):
    _card_previews()

    with caplog.at_level(logging.INFO, logger="pyqt_previews.previews.find_previews"):
        found = find_previews(included=["Missing"])

    assert found == []
    assert "'Missing' matched no previews" in caplog.text


def test_find_previews_limited_to_modules(monkeypatch):
    module = types.ModuleType("fake_previews")
    monkeypatch.setitem(sys.modules, "fake_previews", module)

    exec(
        "from pyqt_previews.previews import Preview, PreviewProvider\n"
        "class ModuleCard(PreviewProvider):\n"
        "    @classmethod\n"
        "    def previews(cls):\n"
        "        return [Preview(object)]\n",
        module.__dict__,
    )
    _card_previews()

    found = find_previews(modules=["fake_previews"])

    assert [t.type_name for t in found] == ["fake_previews.ModuleCard"]


def test_find_previews_missing_module_propagates():
    with pytest.raises(ImportError):
        find_previews(modules=["no_such_preview_module"])


def test_narrowed_excluded_family_is_empty():
    family = PreviewType("app.Card", "Card", (Preview(_widget),))

    assert family.narrowed(PreviewFilter(excluded=["app\\..*"])).previews == ()
    assert family.narrowed(PreviewFilter(included=["Card"])).previews == family.previews


def test_find_previews_declared_in_does_not_import():
    """declared_in restricts to registered families without importing."""
    class Local(PreviewProvider):
        @classmethod
        def previews(cls):
            return [Preview(_widget)]

    class Elsewhere(PreviewProvider):
        __module__ = "other_test_module"

        @classmethod
        def previews(cls):
            return [Preview(_widget)]

    found = find_previews(declared_in=[__name__, "never_imported_module"])

    assert [t.type_name for t in found] == [Local.type_name()]
    assert "never_imported_module" not in sys.modules
