"""Rendering collaborator protocol."""

from typing import Any, Protocol


class PreviewRenderer(Protocol):
    """Protocol for objects that render one instance of a preview family.

    The dispatcher never interprets the outcome: a return value means the
    render succeeded, an exception fails the test that requested it.
    """

    def render(self, preview_type: Any, index: int) -> Any:
        ...
