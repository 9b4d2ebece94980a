"""Discovered preview families."""

from dataclasses import dataclass
from typing import Sequence, Tuple

from pyqt_previews.core.filters import PreviewFilter
from pyqt_previews.core.models import PreviewDescriptor

from .provider import Preview, PreviewSource


@dataclass(frozen=True)
class PreviewType:
    """A preview family as seen by one discovery cycle.

    Holds the live Preview objects the renderer instantiates, next to the
    names the identifier generator needs.
    """

    type_name: str
    display_name: str
    previews: Tuple[Preview, ...]

    @classmethod
    def from_source(cls, source: PreviewSource) -> "PreviewType":
        return cls(
            type_name=source.type_name(),
            display_name=source.label(),
            previews=tuple(source.previews()),
        )

    def to_descriptor(self) -> PreviewDescriptor:
        """Static shape of this family for identifier generation."""
        return PreviewDescriptor(
            type_name=self.type_name,
            display_name=self.display_name,
            devices=tuple(p.device or "" for p in self.previews),
            orientations=tuple(p.orientation for p in self.previews),
            instance_count=len(self.previews),
        )

    def names(self) -> Sequence[str]:
        """Names a filter entry can match this family by."""
        return (self.display_name, self.type_name)

    def narrowed(self, preview_filter: PreviewFilter) -> "PreviewType":
        """Copy keeping only the named instances the filter keeps.

        Unnamed instances are matched by the family's own names. Returns a
        family with no previews when nothing is kept.
        """
        family_included = any(preview_filter.is_included(n) for n in self.names())
        family_excluded = any(preview_filter.is_excluded(n) for n in self.names())
        if family_excluded:
            return PreviewType(self.type_name, self.display_name, ())

        kept = []
        for p in self.previews:
            if p.name is None:
                if family_included:
                    kept.append(p)
                continue
            if (family_included or preview_filter.is_included(p.name)) \
                    and not preview_filter.is_excluded(p.name):
                kept.append(p)
        return PreviewType(self.type_name, self.display_name, tuple(kept))

    def __len__(self) -> int:
        return len(self.previews)
