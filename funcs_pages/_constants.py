"""Common literal values used across funcs_pages.

These constants keep the repository link, the default configuration path, and
the recognised explorer option values centralized so the layout catalogue, the
config loader, and tests import the same values without drifting. Intended for
internal use within the funcs_pages package.

Examples
--------
>>> from funcs_pages import _constants
>>> _constants.REPOSITORY_URL.endswith("/FunCS")
True
>>> "collapsed" in _constants.FOLDER_DEFAULT_STATES
True
"""

from pathlib import Path

REPOSITORY_URL = "https://github.com/Fundamentals-of-Computer-Science/FunCS"
REPOSITORY_LABEL = "GitHub"
SITE_TITLE = "Fundamentals of Computer Science"
EXPLORER_TITLE = "Explorer"
TAGS_FOLDER = "tags"

FOLDER_CLICK_BEHAVIORS = ("link", "collapse")
FOLDER_DEFAULT_STATES = ("collapsed", "open")

DEFAULT_CONFIG = Path("config/site.yaml")
