"""Navigation ordering and page layouts for the course documentation site.

This package describes which presentational units the site renderer places in
each page region, and in which order the explorer lists chapter files and
folders. It also exposes the CLI entry points used by ``uv run pages``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from funcs_pages import main
>>> main()  # doctest: +SKIP
>>> from funcs_pages import app
>>> app(["sort", "ch1", "index"])  # doctest: +SKIP
index
ch1
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
