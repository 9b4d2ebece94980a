"""Preview dispatch exceptions.

Every failure here is scoped to a single synthesized test case. None of them
aborts a discovery cycle or the other cases registered by it.
"""

from typing import Optional


class PreviewError(Exception):
    """Base class for preview discovery and dispatch errors."""


class UnregisteredIdentifier(PreviewError, LookupError):
    """Raised when dispatch receives an identifier absent from the registry.

    The set of identifiers announced to the test runner and the registry
    contents have desynchronized.
    """

    def __init__(self, identifier: str, owner: Optional[str] = None):
        self.identifier = identifier
        self.owner = owner
        where = f" in {owner}" if owner else ""
        super().__init__(f"No preview registered for identifier {identifier!r}{where}")


class IndexOutOfRange(PreviewError, IndexError):
    """Raised when a resolved index no longer fits its preview family."""

    def __init__(self, type_name: str, index: int, count: int):
        self.type_name = type_name
        self.index = index
        self.count = count
        super().__init__(
            f"Preview index {index} out of bounds (count: {count}) for {type_name}"
        )


class PreviewTypeNotFound(PreviewError, LookupError):
    """Raised when the rendering side cannot find the family a test resolved to."""

    def __init__(self, type_name: str):
        self.type_name = type_name
        super().__init__(f"Preview type not found: {type_name}")
