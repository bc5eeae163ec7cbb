"""Opaque references to the presentational units placed in page regions.

The site renderer owns the actual components. This module only names them: a
:class:`Component` is a kind tag from the closed :class:`ComponentKind` set,
an optional typed options payload, and, for the visibility wrappers, the
wrapped unit. One factory function exists per kind so layouts read the same
way the renderer's component constructors do.

Examples
--------
>>> from funcs_pages.layout import components as c
>>> unit = c.desktop_only(c.table_of_contents())
>>> unit.kind.value, unit.inner.kind.value
('desktop-only', 'table-of-contents')
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from funcs_pages._constants import EXPLORER_TITLE, SITE_TITLE
from funcs_pages.ordering import explorer_sort, hide_tags_folder

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from funcs_pages.ordering import Comparator, EntryFilter


class ComponentKind(enum.StrEnum):
    """Closed set of presentational unit kinds."""

    HEAD = "head"
    FOOTER = "footer"
    BREADCRUMBS = "breadcrumbs"
    ARTICLE_TITLE = "article-title"
    CONTENT_META = "content-meta"
    TAG_LIST = "tag-list"
    PAGE_TITLE = "page-title"
    SPACER = "spacer"
    SEARCH = "search"
    DARKMODE = "darkmode"
    EXPLORER = "explorer"
    TABLE_OF_CONTENTS = "table-of-contents"
    BACKLINKS = "backlinks"
    DESKTOP_ONLY = "desktop-only"
    MOBILE_ONLY = "mobile-only"


@dc.dataclass(frozen=True, slots=True)
class ExplorerOptions:
    """Configuration handed to the navigation-tree unit.

    Attributes
    ----------
    folder_click_behavior : str
        ``"link"`` navigates to the folder page, ``"collapse"`` toggles it.
    folder_default_state : str
        ``"collapsed"`` or ``"open"`` for folders without saved state.
    sort_fn : Comparator
        Comparator ordering each sibling group.
    title : str
        Heading shown above the tree.
    use_saved_state : bool
        Whether the renderer restores folder state between visits.
    filter_fn : EntryFilter or None
        Predicate dropping entries before sorting.
    """

    folder_click_behavior: str = "link"
    folder_default_state: str = "collapsed"
    sort_fn: Comparator = explorer_sort
    title: str = EXPLORER_TITLE
    use_saved_state: bool = True
    filter_fn: EntryFilter | None = hide_tags_folder


@dc.dataclass(frozen=True, slots=True)
class PageTitleOptions:
    """Site title shown at the top of the left rail."""

    title: str = SITE_TITLE


@dc.dataclass(frozen=True, slots=True)
class FooterOptions:
    """Footer links as ``(label, href)`` pairs in display order."""

    links: tuple[tuple[str, str], ...] = ()


ComponentOptions = ExplorerOptions | FooterOptions | PageTitleOptions


@dc.dataclass(frozen=True, slots=True)
class Component:
    """A reference to one presentational unit.

    Attributes
    ----------
    kind : ComponentKind
        Which unit the renderer should instantiate.
    options : ComponentOptions or None
        Typed payload for units that take configuration.
    inner : Component or None
        Wrapped unit for ``desktop-only`` and ``mobile-only``.
    """

    kind: ComponentKind
    options: ComponentOptions | None = None
    inner: Component | None = None

    def unwrap(self) -> Component:
        """Return the innermost unit, skipping visibility wrappers."""
        unit = self
        while unit.inner is not None:
            unit = unit.inner
        return unit

    def describe(self) -> dict[str, typ.Any]:
        """Return a plain-data description suitable for YAML or JSON output."""
        payload: dict[str, typ.Any] = {"kind": self.kind.value}
        match self.options:
            case ExplorerOptions() as opts:
                payload["options"] = {
                    "title": opts.title,
                    "folder_click_behavior": opts.folder_click_behavior,
                    "folder_default_state": opts.folder_default_state,
                    "use_saved_state": opts.use_saved_state,
                    "sort_fn": _callable_name(opts.sort_fn),
                    "filter_fn": _callable_name(opts.filter_fn),
                }
            case FooterOptions() as opts:
                payload["options"] = {"links": dict(opts.links)}
            case PageTitleOptions() as opts:
                payload["options"] = {"title": opts.title}
            case _:
                pass
        if self.inner is not None:
            payload["inner"] = self.inner.describe()
        return payload


def _callable_name(func: cabc.Callable[..., typ.Any] | None) -> str | None:
    if func is None:
        return None
    return getattr(func, "__qualname__", None) or repr(func)


def head() -> Component:
    return Component(ComponentKind.HEAD)


def footer(links: cabc.Mapping[str, str] | None = None) -> Component:
    """Return a footer unit listing ``links`` in mapping order."""
    return Component(
        ComponentKind.FOOTER, FooterOptions(tuple((links or {}).items()))
    )


def breadcrumbs() -> Component:
    return Component(ComponentKind.BREADCRUMBS)


def article_title() -> Component:
    return Component(ComponentKind.ARTICLE_TITLE)


def content_meta() -> Component:
    return Component(ComponentKind.CONTENT_META)


def tag_list() -> Component:
    return Component(ComponentKind.TAG_LIST)


def page_title(title: str = SITE_TITLE) -> Component:
    return Component(ComponentKind.PAGE_TITLE, PageTitleOptions(title))


def spacer() -> Component:
    return Component(ComponentKind.SPACER)


def search() -> Component:
    return Component(ComponentKind.SEARCH)


def darkmode() -> Component:
    return Component(ComponentKind.DARKMODE)


def explorer(options: ExplorerOptions | None = None) -> Component:
    """Return a navigation-tree unit, using default options when none given."""
    return Component(ComponentKind.EXPLORER, options or ExplorerOptions())


def table_of_contents() -> Component:
    return Component(ComponentKind.TABLE_OF_CONTENTS)


def backlinks() -> Component:
    return Component(ComponentKind.BACKLINKS)


def desktop_only(unit: Component) -> Component:
    """Wrap ``unit`` so it renders on desktop viewports only."""
    return Component(ComponentKind.DESKTOP_ONLY, inner=unit)


def mobile_only(unit: Component) -> Component:
    """Wrap ``unit`` so it renders on mobile viewports only."""
    return Component(ComponentKind.MOBILE_ONLY, inner=unit)


__all__ = [
    "Component",
    "ComponentKind",
    "ComponentOptions",
    "ExplorerOptions",
    "FooterOptions",
    "PageTitleOptions",
    "article_title",
    "backlinks",
    "breadcrumbs",
    "content_meta",
    "darkmode",
    "desktop_only",
    "explorer",
    "footer",
    "head",
    "mobile_only",
    "page_title",
    "search",
    "spacer",
    "table_of_contents",
    "tag_list",
]
