"""
Dynamic dispatch from a test identifier to a preview test.

The test runner invokes ``PreviewDispatcher.dispatch`` once per synthesized
test, with the identifier that test was registered under. The dispatcher
resolves it through the registry and forwards the instance to the test's
``test_preview``. Whatever that returns or raises passes through untouched.

An identifier missing from the registry is always a failure of that single
test, never a silent no-op.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from .exceptions import IndexOutOfRange, UnregisteredIdentifier
from .models import ResolvedInstance
from .registry import PreviewRegistry

logger = logging.getLogger(__name__)


class DispatchablePreviewTest(ABC):
    """
    ABC for test suites that can run a single resolved preview.

    The dispatcher calls ``test_preview`` through this contract instead of
    inspecting the test's concrete type.
    """

    @abstractmethod
    def test_preview(self, resolved: ResolvedInstance) -> Any:
        """
        Run the test for one preview instance.

        Args:
            resolved: The family descriptor and instance index to test
        """
        pass


class PreviewDispatcher:
    """Resolves identifiers through a registry and forwards to the test.

    Example:
        dispatcher = PreviewDispatcher(registry)
        dispatcher.dispatch("portrait-CardView-1-1", test_instance)
    """

    def __init__(self, registry: PreviewRegistry, allow_positional_fallback: bool = False):
        """
        Args:
            registry: Registry populated by the current discovery cycle
            allow_positional_fallback: Resolve unknown identifiers by their
                trailing counter. Legacy behaviour, off by default.
        """
        self.registry = registry
        self.allow_positional_fallback = allow_positional_fallback

    def resolve(self, identifier: str) -> ResolvedInstance:
        """
        Resolve an identifier to its preview instance.

        Raises:
            UnregisteredIdentifier: If neither exact nor (opt-in) positional
                lookup finds the identifier
            IndexOutOfRange: If the resolved index no longer fits its family
        """
        resolved = self.registry.lookup(identifier)

        if resolved is None and self.allow_positional_fallback:
            resolved = self.registry.resolve_positional(identifier)
            if resolved is not None:
                logger.warning(
                    f"Identifier {identifier!r} not registered in {self.registry.owner}; "
                    f"resolved positionally to {resolved.descriptor.type_name}[{resolved.index}]"
                )

        if resolved is None:
            raise UnregisteredIdentifier(identifier, self.registry.owner)

        # ResolvedInstance validates the index on construction; this only trips
        # if a descriptor changed after registration
        count = resolved.descriptor.instance_count
        if not resolved.fits(count):
            raise IndexOutOfRange(resolved.descriptor.type_name, resolved.index, count)

        return resolved

    def dispatch(self, identifier: str, target: DispatchablePreviewTest) -> Any:
        """
        Run ``target.test_preview`` for the instance registered under ``identifier``.

        Args:
            identifier: Identifier the test was registered with
            target: Test suite instance to forward to

        Returns:
            Whatever ``target.test_preview`` returns

        Raises:
            TypeError: If target doesn't implement DispatchablePreviewTest
            UnregisteredIdentifier: If the identifier cannot be resolved
            IndexOutOfRange: If the resolved index no longer fits its family
        """
        if not isinstance(target, DispatchablePreviewTest):
            raise TypeError(
                f"{type(target).__name__} does not implement DispatchablePreviewTest ABC. "
                f"Add DispatchablePreviewTest to its base classes and implement test_preview()."
            )

        resolved = self.resolve(identifier)
        logger.debug(
            f"Dispatching {identifier!r} -> {resolved.descriptor.type_name}[{resolved.index}]"
        )
        return target.test_preview(resolved)
