"""Cyclopts CLI entrypoint for inspecting the course site layout and ordering.

The ``pages`` console script defined here prints the composed region
assignment of either page layout as YAML, and orders navigation entry names
with the same policy the explorer uses. Both commands are read-only helpers
for checking the site's structure locally or in CI.

Examples
--------
Print the list-page layout:

>>> from funcs_pages.cli import app
>>> app(["layout", "--kind", "list"])  # doctest: +SKIP

Order a set of sibling entries (a trailing ``/`` marks a folder):

>>> app(["sort", "ch1-3", "index", "notes/", "ch0"])  # doctest: +SKIP
index
ch0
ch1-3
notes/
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml import YAML

from ._constants import DEFAULT_CONFIG
from .config import SiteConfig, load_site_config
from .layout import PageKind, Region, build_layout_catalogue
from .ordering import NavEntry, sort_entries

app = App(name="pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _resolve_config(path: Path | None) -> SiteConfig:
    """Load ``path`` when given, else the default file if present, else defaults."""
    if path is not None:
        return load_site_config(path)
    if DEFAULT_CONFIG.exists():
        return load_site_config(DEFAULT_CONFIG)
    return SiteConfig()


def _parse_choice(value: str, enum_type: type[PageKind] | type[Region]) -> typ.Any:
    try:
        return enum_type(value)
    except ValueError as exc:
        options = ", ".join(member.value for member in enum_type)
        msg = f"Unknown value '{value}'. Expected one of: {options}"
        raise ValueError(msg) from exc


def _build_dump_yaml() -> YAML:
    yaml = YAML()
    yaml.width = 120
    yaml.indent(mapping=2, sequence=4, offset=2)
    return yaml


@app.command(help="Print the region assignment of a page layout as YAML.")
def layout(
    *,
    kind: typ.Annotated[
        str, Parameter(help="Page kind: content or list", env_var="INPUT_KIND")
    ] = PageKind.CONTENT.value,
    region: typ.Annotated[
        str | None, Parameter(help="Only print this region", env_var="INPUT_REGION")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = None,
) -> None:
    """Print the composed layout for one page kind.

    Parameters
    ----------
    kind : str, optional
        ``"content"`` (default) or ``"list"``.
    region : str or None, optional
        Region name such as ``"left"`` or ``"beforeBody"``; when ``None`` every
        region is printed.
    config : Path or None, optional
        Site configuration file; falls back to ``config/site.yaml`` when it
        exists and to the compiled-in defaults otherwise.

    Raises
    ------
    ValueError
        If ``kind`` or ``region`` is not a recognised name.
    """
    page_kind = _parse_choice(kind, PageKind)
    selected = _parse_choice(region, Region) if region else None
    catalogue = build_layout_catalogue(_resolve_config(config))
    regions = catalogue.regions(page_kind)
    document = {
        name.value: [unit.describe() for unit in units]
        for name, units in regions.items()
        if selected is None or name is selected
    }
    _build_dump_yaml().dump(document, sys.stdout)


@app.command(help="Order navigation entry names the way the explorer does.")
def sort(*names: str) -> None:
    """Print ``names`` in explorer order, one per line.

    Parameters
    ----------
    *names : str
        Sibling entry names. A trailing ``/`` marks a folder; the slash is
        kept in the output.
    """
    entries = [
        NavEntry(name.rstrip("/"), is_file=not name.endswith("/")) for name in names
    ]
    for entry in sort_entries(entries):
        print(entry.name if entry.is_file else f"{entry.name}/")


def main() -> None:
    """Invoke the Cyclopts application that powers the `pages` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
