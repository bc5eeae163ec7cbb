"""Page layouts for the course site.

Two layouts exist. Content pages (a single note or chapter) show breadcrumbs,
title, metadata and tags above the body, the explorer in the left rail, and
the table of contents plus backlinks in the right rail. List pages (tag and
folder indexes) drop the tag list and leave the right rail empty. Both share
the head and footer furniture from :func:`shared_page_components`.

The explorer in both left rails is configured with
:func:`~funcs_pages.ordering.explorer_sort`, so chapters appear in teaching
order.

Examples
--------
>>> from funcs_pages.layout import CATALOGUE, PageKind, Region
>>> len(CATALOGUE.regions(PageKind.CONTENT)[Region.RIGHT])
2
>>> CATALOGUE.regions(PageKind.LIST)[Region.RIGHT]
()
"""

from __future__ import annotations

import dataclasses as dc

from funcs_pages.config import SiteConfig
from funcs_pages.ordering import explorer_sort

from . import components as c
from .models import PageKind, PageLayout, RegionAssignment, SharedLayout, compose_regions


@dc.dataclass(frozen=True, slots=True)
class LayoutCatalogue:
    """The shared furniture and both page layouts, built once."""

    shared: SharedLayout
    content_page: PageLayout
    list_page: PageLayout

    def layout_for(self, kind: PageKind) -> PageLayout:
        """Return the page layout registered for ``kind``."""
        match kind:
            case PageKind.CONTENT:
                return self.content_page
            case PageKind.LIST:
                return self.list_page
        msg = f"Unknown page kind: {kind!r}"
        raise ValueError(msg)

    def regions(self, kind: PageKind) -> RegionAssignment:
        """Return the full region assignment for a page of ``kind``."""
        return compose_regions(self.shared, self.layout_for(kind))


def shared_page_components(config: SiteConfig | None = None) -> SharedLayout:
    """Return the head and footer furniture present on every page."""
    site = config or SiteConfig()
    return SharedLayout(
        head=c.head(),
        footer=c.footer(site.footer.links),
        header=(),
        after_body=(),
    )


def _left_rail(site: SiteConfig) -> tuple[c.Component, ...]:
    options = c.ExplorerOptions(
        folder_click_behavior=site.explorer.folder_click_behavior,
        folder_default_state=site.explorer.folder_default_state,
        sort_fn=explorer_sort,
        title=site.explorer.title,
        use_saved_state=site.explorer.use_saved_state,
    )
    return (
        c.page_title(site.page_title),
        c.mobile_only(c.spacer()),
        c.search(),
        c.darkmode(),
        c.desktop_only(c.explorer(options)),
    )


def default_content_page_layout(config: SiteConfig | None = None) -> PageLayout:
    """Return the layout for pages that display a single note."""
    site = config or SiteConfig()
    return PageLayout(
        before_body=(
            c.breadcrumbs(),
            c.article_title(),
            c.content_meta(),
            c.tag_list(),
        ),
        left=_left_rail(site),
        right=(
            c.desktop_only(c.table_of_contents()),
            c.backlinks(),
        ),
    )


def default_list_page_layout(config: SiteConfig | None = None) -> PageLayout:
    """Return the layout for pages that list other pages (tags, folders)."""
    site = config or SiteConfig()
    return PageLayout(
        before_body=(c.breadcrumbs(), c.article_title(), c.content_meta()),
        left=_left_rail(site),
        right=(),
    )


def build_layout_catalogue(config: SiteConfig | None = None) -> LayoutCatalogue:
    """Build the shared furniture and both page layouts from ``config``.

    Parameters
    ----------
    config : SiteConfig, optional
        Site settings; the compiled-in defaults are used when omitted.

    Returns
    -------
    LayoutCatalogue
        Immutable catalogue. Building twice from equal configs yields equal
        catalogues.
    """
    return LayoutCatalogue(
        shared=shared_page_components(config),
        content_page=default_content_page_layout(config),
        list_page=default_list_page_layout(config),
    )


CATALOGUE = build_layout_catalogue()
SHARED_PAGE_COMPONENTS = CATALOGUE.shared
DEFAULT_CONTENT_PAGE_LAYOUT = CATALOGUE.content_page
DEFAULT_LIST_PAGE_LAYOUT = CATALOGUE.list_page


__all__ = [
    "CATALOGUE",
    "DEFAULT_CONTENT_PAGE_LAYOUT",
    "DEFAULT_LIST_PAGE_LAYOUT",
    "SHARED_PAGE_COMPONENTS",
    "LayoutCatalogue",
    "build_layout_catalogue",
    "default_content_page_layout",
    "default_list_page_layout",
    "shared_page_components",
]
