"""Typed dataclasses describing funcs_pages site configuration structures."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import types

from funcs_pages._constants import (
    EXPLORER_TITLE,
    REPOSITORY_LABEL,
    REPOSITORY_URL,
    SITE_TITLE,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


def _default_footer_links() -> cabc.Mapping[str, str]:
    return types.MappingProxyType({REPOSITORY_LABEL: REPOSITORY_URL})


@dc.dataclass(frozen=True, slots=True)
class FooterConfig:
    """Links rendered in the footer of every page, keyed by label.

    The links are stored as a read-only copy of the mapping passed in.
    """

    links: cabc.Mapping[str, str] = dc.field(default_factory=_default_footer_links)

    def __post_init__(self) -> None:
        object.__setattr__(self, "links", types.MappingProxyType(dict(self.links)))


@dc.dataclass(frozen=True, slots=True)
class ExplorerConfig:
    """Behaviour of the navigation-tree unit in the left rail."""

    title: str = EXPLORER_TITLE
    folder_click_behavior: str = "link"
    folder_default_state: str = "collapsed"
    use_saved_state: bool = True


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Site-wide settings consumed by the layout catalogue.

    The no-argument instance reproduces the compiled-in layout exactly.
    """

    page_title: str = SITE_TITLE
    footer: FooterConfig = dc.field(default_factory=FooterConfig)
    explorer: ExplorerConfig = dc.field(default_factory=ExplorerConfig)


__all__ = [
    "ExplorerConfig",
    "FooterConfig",
    "SiteConfig",
    "SiteConfigError",
]
