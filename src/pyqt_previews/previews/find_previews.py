"""
Preview discovery.

Imports the modules that declare previews, collects the registered preview
sources in registration order and applies inclusion / exclusion filters.
"""

from __future__ import annotations

import importlib
import logging
from typing import Iterable, List, Optional, Sequence

from pyqt_previews.core.filters import PreviewFilter

from .preview_type import PreviewType
from .provider import PreviewSource, registered_preview_sources

logger = logging.getLogger(__name__)


def import_preview_modules(modules: Iterable[str]) -> None:
    """Import modules so their preview providers register.

    Import errors are not masked: a module that cannot be imported fails
    the discovery cycle.
    """
    for module_name in modules:
        importlib.import_module(module_name)
        logger.debug(f"Imported preview module {module_name}")


def _declared_in(source: PreviewSource, modules: Sequence[str]) -> bool:
    type_name = source.type_name()
    return any(
        type_name.startswith(f"{module}.") for module in modules
    )


def find_previews(included: Optional[Sequence[str]] = None,
                  excluded: Optional[Sequence[str]] = None,
                  modules: Optional[Sequence[str]] = None,
                  declared_in: Optional[Sequence[str]] = None) -> List[PreviewType]:
    """Discover preview families.

    Args:
        included: Family or instance names / patterns to keep, None keeps all
        excluded: Family or instance names / patterns to drop after inclusion
        modules: Modules to import first; when given, only families declared
            in these modules (or their submodules) are returned
        declared_in: Already-imported modules to restrict discovery to,
            without importing anything

    Returns:
        PreviewType families in registration order. Families left with no
        previews after filtering are omitted.
    """
    if modules:
        import_preview_modules(modules)

    scope = list(modules or []) + list(declared_in or [])
    sources = registered_preview_sources()
    if scope:
        sources = [s for s in sources if _declared_in(s, scope)]

    preview_filter = PreviewFilter(included=included, excluded=excluded)
    all_types = [PreviewType.from_source(source) for source in sources]

    if preview_filter.is_empty:
        found = all_types
    else:
        narrowed = (t.narrowed(preview_filter) for t in all_types)
        found = [t for t in narrowed if t.previews]

    _report_unmatched(preview_filter, all_types)
    logger.debug(
        f"Found {len(found)} preview families ({sum(len(t) for t in found)} previews) "
        f"out of {len(all_types)} registered"
    )
    return found


def _report_unmatched(preview_filter: PreviewFilter, types: Sequence[PreviewType]) -> None:
    names = []
    for preview_type in types:
        names.extend(preview_type.names())
        names.extend(p.name for p in preview_type.previews if p.name)
    for entry in preview_filter.unmatched_inclusions(names):
        logger.info(f"Preview inclusion entry {entry!r} matched no previews")
