"""
Preview declarations with metaclass auto-registration.

Preview providers register themselves when their classes are defined, so
discovery is a matter of importing the modules that declare them.

Design:
- Preview: one renderable instance (widget factory + device/orientation)
- PreviewProviderMeta: registers concrete PreviewProvider subclasses
- @preview: registers a single widget factory function
- PREVIEW_SOURCES: registration-ordered mapping type_name -> source
"""

from abc import ABCMeta, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Union
import logging

from pyqt_previews.core.models import DEFAULT_ORIENTATION

logger = logging.getLogger(__name__)

# Zero-argument callable returning the widget to preview
WidgetFactory = Callable[[], object]


@dataclass(frozen=True)
class Preview:
    """One renderable preview instance.

    Attributes:
        factory: Zero-argument callable returning a QWidget
        name: Optional instance name, usable in inclusion/exclusion filters
        device: Device the preview targets, None for any device
        orientation: "portrait" or "landscape"
    """

    factory: WidgetFactory
    name: Optional[str] = None
    device: Optional[str] = None
    orientation: str = DEFAULT_ORIENTATION

    def make_widget(self):
        return self.factory()


# Global registry of preview sources
# Maps type_name -> PreviewProvider subclass or FunctionPreviewSource
PREVIEW_SOURCES: Dict[str, "PreviewSource"] = {}


def type_name_for(obj) -> str:
    """Stable, process-unique name of a declaring class or function."""
    return f"{obj.__module__}.{obj.__qualname__}"


def _register(type_name: str, source: "PreviewSource") -> None:
    if type_name in PREVIEW_SOURCES:
        logger.warning(
            f"Preview type '{type_name}' already registered. Overwriting."
        )
        # Re-definition moves the entry to the end, matching definition order
        del PREVIEW_SOURCES[type_name]
    PREVIEW_SOURCES[type_name] = source
    logger.debug(f"Registered preview source '{type_name}'")


class PreviewProviderMeta(ABCMeta):
    """
    Metaclass for automatic preview provider registration.

    1. Only registers concrete providers (no abstract methods remaining)
    2. Skips classes marked ``_register_preview = False`` in their own body
    3. Keys the registry by module-qualified class name

    Example:
        class CardViewPreviews(PreviewProvider):
            display_name = "CardView"

            @classmethod
            def previews(cls):
                return [
                    Preview(lambda: CardView(title="Short")),
                    Preview(lambda: CardView(title="Long " * 20), orientation="landscape"),
                ]

    The provider auto-registers when the class body finishes executing.
    """

    def __new__(mcs, name, bases, attrs):
        new_class = super().__new__(mcs, name, bases, attrs)

        if getattr(new_class, '__abstractmethods__', None):
            logger.debug(
                f"Skipping registration for {name} - abstract methods remaining: "
                f"{set(new_class.__abstractmethods__)}"
            )
            return new_class

        if not attrs.get('_register_preview', True):
            logger.debug(f"Skipping registration for {name} - _register_preview is False")
            return new_class

        _register(type_name_for(new_class), new_class)
        return new_class


class PreviewProvider(metaclass=PreviewProviderMeta):
    """
    Base class for preview families.

    Subclasses implement ``previews()`` and may set ``display_name``, which
    otherwise defaults to the class name.
    """

    display_name: Optional[str] = None

    @classmethod
    @abstractmethod
    def previews(cls) -> Sequence[Preview]:
        """Return the preview instances of this family, in a stable order."""
        pass

    @classmethod
    def type_name(cls) -> str:
        return type_name_for(cls)

    @classmethod
    def label(cls) -> str:
        return cls.display_name or cls.__name__


class FunctionPreviewSource:
    """A single widget factory function registered with ``@preview``."""

    def __init__(self, func: WidgetFactory, name: Optional[str] = None,
                 device: Optional[str] = None, orientation: str = DEFAULT_ORIENTATION):
        self.func = func
        self.display_name = name
        self._preview = Preview(func, name=name, device=device, orientation=orientation)

    def previews(self) -> Sequence[Preview]:
        return [self._preview]

    def type_name(self) -> str:
        return type_name_for(self.func)

    def label(self) -> str:
        return self.display_name or self.func.__name__


PreviewSource = Union[type, FunctionPreviewSource]


def preview(name: Optional[str] = None, device: Optional[str] = None,
            orientation: str = DEFAULT_ORIENTATION):
    """
    Register a zero-argument widget factory as a single-preview family.

    Example:
        @preview(name="Empty card", orientation="landscape")
        def empty_card():
            return CardView(title="")

    The function itself is returned unchanged.
    """
    def decorator(func: WidgetFactory) -> WidgetFactory:
        source = FunctionPreviewSource(func, name=name, device=device, orientation=orientation)
        _register(source.type_name(), source)
        return func
    return decorator


def registered_preview_sources() -> List["PreviewSource"]:
    """All registered sources, in registration order."""
    return list(PREVIEW_SOURCES.values())


def clear_preview_providers() -> None:
    """Forget every registered preview source."""
    PREVIEW_SOURCES.clear()
