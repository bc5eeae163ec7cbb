"""Declarative page layouts for the course site.

A layout assigns each page :class:`Region` an ordered tuple of
:class:`Component` references. The renderer picks the layout for a page's
:class:`PageKind` from :data:`CATALOGUE` and instantiates each region's units
in order.

Examples
--------
>>> from funcs_pages.layout import CATALOGUE, PageKind, Region
>>> [unit.kind.value for unit in CATALOGUE.regions(PageKind.LIST)[Region.BEFORE_BODY]]
['breadcrumbs', 'article-title', 'content-meta']
"""

from .catalogue import (
    CATALOGUE,
    DEFAULT_CONTENT_PAGE_LAYOUT,
    DEFAULT_LIST_PAGE_LAYOUT,
    SHARED_PAGE_COMPONENTS,
    LayoutCatalogue,
    build_layout_catalogue,
    default_content_page_layout,
    default_list_page_layout,
    shared_page_components,
)
from .components import (
    Component,
    ComponentKind,
    ExplorerOptions,
    FooterOptions,
    PageTitleOptions,
)
from .models import (
    PageKind,
    PageLayout,
    Region,
    RegionAssignment,
    SharedLayout,
    compose_regions,
)

__all__ = [
    "CATALOGUE",
    "DEFAULT_CONTENT_PAGE_LAYOUT",
    "DEFAULT_LIST_PAGE_LAYOUT",
    "SHARED_PAGE_COMPONENTS",
    "Component",
    "ComponentKind",
    "ExplorerOptions",
    "FooterOptions",
    "LayoutCatalogue",
    "PageKind",
    "PageLayout",
    "PageTitleOptions",
    "Region",
    "RegionAssignment",
    "SharedLayout",
    "build_layout_catalogue",
    "compose_regions",
    "default_content_page_layout",
    "default_list_page_layout",
    "shared_page_components",
]
