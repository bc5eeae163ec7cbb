"""Region identifiers and the layout containers built from them."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import types

from .components import Component

RegionAssignment = cabc.Mapping["Region", tuple[Component, ...]]


class Region(enum.StrEnum):
    """Named areas of a rendered page, in document order."""

    HEAD = "head"
    HEADER = "header"
    BEFORE_BODY = "beforeBody"
    LEFT = "left"
    RIGHT = "right"
    AFTER_BODY = "afterBody"
    FOOTER = "footer"


class PageKind(enum.StrEnum):
    """The two page variants the catalogue provides layouts for."""

    CONTENT = "content"
    LIST = "list"


@dc.dataclass(frozen=True, slots=True)
class SharedLayout:
    """Regions that are identical on every page."""

    head: Component
    footer: Component
    header: tuple[Component, ...] = ()
    after_body: tuple[Component, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class PageLayout:
    """Regions that differ between content pages and list pages."""

    before_body: tuple[Component, ...]
    left: tuple[Component, ...]
    right: tuple[Component, ...]


def compose_regions(shared: SharedLayout, page: PageLayout) -> RegionAssignment:
    """Merge shared furniture and a page layout into a full region mapping.

    Every :class:`Region` is present in the result, in document order; the
    returned mapping is read-only.
    """
    return types.MappingProxyType(
        {
            Region.HEAD: (shared.head,),
            Region.HEADER: shared.header,
            Region.BEFORE_BODY: page.before_body,
            Region.LEFT: page.left,
            Region.RIGHT: page.right,
            Region.AFTER_BODY: shared.after_body,
            Region.FOOTER: (shared.footer,),
        }
    )


__all__ = [
    "PageKind",
    "PageLayout",
    "Region",
    "RegionAssignment",
    "SharedLayout",
    "compose_regions",
]
