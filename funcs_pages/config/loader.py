"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _build_explorer_config,
    _build_footer_config,
    _optional_str,
    _require_mapping,
)
from .models import SiteConfig

if typ.TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing site-wide layout choices.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/site.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration. Sections absent from the file keep their
        compiled-in defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure or a section is not a mapping, a footer
        link lacks a target, or an explorer option has an unknown value.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from funcs_pages.config import load_site_config
    >>> config = load_site_config(Path("config/site.yaml"))  # doctest: +SKIP
    >>> config.footer.links["GitHub"]  # doctest: +SKIP
    'https://github.com/Fundamentals-of-Computer-Science/FunCS'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    raw = _require_mapping(loaded, "<root>")

    site_raw = _require_mapping(raw.get("site"), "site")
    footer_raw = _require_mapping(raw.get("footer"), "footer")
    explorer_raw = _require_mapping(raw.get("explorer"), "explorer")

    defaults = SiteConfig()
    config = SiteConfig(
        page_title=_optional_str(site_raw.get("page_title")) or defaults.page_title,
        footer=_build_footer_config(footer_raw),
        explorer=_build_explorer_config(explorer_raw),
    )
    logger.debug("loaded site configuration from %s", path)
    return config


__all__ = ["load_site_config"]
