"""Load and validate site configuration YAML for the course site layout.

This subpackage parses the project's ``site.yaml`` file and produces typed
dataclasses (:class:`SiteConfig`, :class:`FooterConfig`,
:class:`ExplorerConfig`) that the layout catalogue consumes. Every key is
optional: a missing section keeps the compiled-in default, so
``SiteConfig()`` and an empty file describe the same site.

Examples
--------
>>> from funcs_pages.config import SiteConfig
>>> SiteConfig().explorer.folder_default_state
'collapsed'
"""

from .loader import load_site_config
from .models import ExplorerConfig, FooterConfig, SiteConfig, SiteConfigError

__all__ = [
    "ExplorerConfig",
    "FooterConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
