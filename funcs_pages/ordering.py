r"""Ordering policy for entries in the site's navigation tree.

The explorer sidebar lists chapter files and folders. Course chapters must
appear in teaching order rather than alphabetical order, so a small rank table
pins the known chapter slugs first. Everything else falls back to "folders
before files" and then a natural, case-insensitive name comparison.

The policy is a chain of three comparators evaluated until one of them decides:

1. :func:`compare_by_rank` consults :data:`ORDER_RANK`;
2. :func:`compare_by_kind` puts folders ahead of files;
3. :func:`compare_by_name` compares names naturally (``ch2`` before ``ch10``).

:func:`explorer_sort` is the resulting comparator and is handed to the
explorer unit of every page layout.

Examples
--------
>>> from funcs_pages.ordering import NavEntry, sort_entries
>>> names = ["ch1-3", "index", "ch1-1", "ch0", "ch1"]
>>> [entry.name for entry in sort_entries(NavEntry(n, is_file=True) for n in names)]
['index', 'ch0', 'ch1', 'ch1-1', 'ch1-3']
>>> from funcs_pages.ordering import explorer_sort
>>> explorer_sort(NavEntry("ch2", True), NavEntry("ch10", True)) < 0
True
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import functools
import re
import types
import typing as typ
import unicodedata

from ._constants import TAGS_FOLDER

_TOKEN = re.compile(r"\d+|.", re.DOTALL)
_VARIABLE, _DIGITS, _LETTER = 0, 1, 2
# Whitespace, then punctuation and symbols, in root collation order.
_VARIABLE_ORDER = "\t\n\x0b\x0c\r _-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"

ORDER_RANK: cabc.Mapping[str, int] = types.MappingProxyType(
    {
        "index": 0,
        "ch0": 1,
        "ch1": 2,
        "ch1-1": 3,
        "ch1-2": 4,
        "ch1-3": 5,
        "ch1-4": 6,
        "ch1-5": 7,
    }
)


class SortableEntry(typ.Protocol):
    """Anything the ordering policy can compare."""

    name: str | None
    is_file: bool


Comparator = cabc.Callable[[typ.Any, typ.Any], int]
EntryFilter = cabc.Callable[[typ.Any], bool]


@dc.dataclass(frozen=True, slots=True)
class NavEntry:
    """A file or folder node in the navigation tree.

    Attributes
    ----------
    name : str
        Slug used for rank lookups and name comparison; may be empty.
    is_file : bool
        ``True`` for a content page, ``False`` for a folder.
    children : tuple[NavEntry, ...]
        Child entries of a folder, in whatever order the tree builder found
        them.
    """

    name: str = ""
    is_file: bool = False
    children: tuple[NavEntry, ...] = ()


def _entry_name(entry: SortableEntry) -> str:
    return getattr(entry, "name", None) or ""


def _entry_is_file(entry: SortableEntry) -> bool:
    return bool(getattr(entry, "is_file", False))


def natural_key(name: str) -> tuple[tuple[int, int | str], ...]:
    """Return a key comparing names the way a base-sensitivity collator does.

    Case and accents are ignored and runs of digits compare by numeric value.
    Each element pairs a class with a weight: spaces, punctuation and symbols
    sort before digit runs, which sort before letters. ASCII punctuation
    follows the root collation order (``_`` before ``-`` before ``.``).

    Examples
    --------
    >>> natural_key("Ch10")
    ((2, 'c'), (2, 'h'), (1, 10))
    >>> natural_key("Étude") == natural_key("etude")
    True
    """
    decomposed = unicodedata.normalize("NFKD", name)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    key: list[tuple[int, int | str]] = []
    for token in _TOKEN.findall(stripped.casefold()):
        if token.isdecimal():
            key.append((_DIGITS, int(token)))
        elif unicodedata.category(token)[0] in "LM":
            key.append((_LETTER, token))
        else:
            key.append((_VARIABLE, _variable_weight(token)))
    return tuple(key)


def _variable_weight(char: str) -> int:
    index = _VARIABLE_ORDER.find(char)
    if index >= 0:
        return index
    return len(_VARIABLE_ORDER) + ord(char)


def compare_by_rank(
    a: SortableEntry,
    b: SortableEntry,
    rank: cabc.Mapping[str, int] = ORDER_RANK,
) -> int:
    """Order entries whose names appear in ``rank``; ranked names lead.

    Returns ``0`` when neither name is ranked so later comparators decide.
    """
    a_rank = rank.get(_entry_name(a))
    b_rank = rank.get(_entry_name(b))
    if a_rank is not None and b_rank is not None:
        return a_rank - b_rank
    if a_rank is not None:
        return -1
    if b_rank is not None:
        return 1
    return 0


def compare_by_kind(a: SortableEntry, b: SortableEntry) -> int:
    """Place folders before files; entries of the same kind tie."""
    a_file = _entry_is_file(a)
    if a_file == _entry_is_file(b):
        return 0
    return 1 if a_file else -1


def compare_by_name(a: SortableEntry, b: SortableEntry) -> int:
    """Compare names naturally, ignoring case and accents."""
    a_key = natural_key(_entry_name(a))
    b_key = natural_key(_entry_name(b))
    return (a_key > b_key) - (a_key < b_key)


def chain_comparators(*comparators: Comparator) -> Comparator:
    """Combine comparators so the first non-zero verdict wins.

    Parameters
    ----------
    *comparators : Comparator
        Two-argument comparison functions tried in order.

    Returns
    -------
    Comparator
        A comparator returning the first non-zero result, or ``0`` when every
        comparator ties.
    """

    def _chained(a: typ.Any, b: typ.Any) -> int:
        for comparator in comparators:
            result = comparator(a, b)
            if result:
                return result
        return 0

    return _chained


_explorer_chain = chain_comparators(compare_by_rank, compare_by_kind, compare_by_name)
_default_chain = chain_comparators(compare_by_kind, compare_by_name)


def explorer_sort(a: SortableEntry, b: SortableEntry) -> int:
    """Order two sibling entries for the course explorer.

    Ranked chapter slugs come first in rank order, then folders before files,
    then a natural name comparison. The comparator never raises; missing names
    compare as the empty string.

    Parameters
    ----------
    a, b : SortableEntry
        Entries exposing ``name`` and ``is_file``.

    Returns
    -------
    int
        Negative when ``a`` sorts first, positive when ``b`` sorts first, and
        ``0`` for a tie that the caller's stable sort leaves in input order.
    """
    return _explorer_chain(a, b)


def default_sort(a: SortableEntry, b: SortableEntry) -> int:
    """Order entries folders-first then by name, without the rank table."""
    return _default_chain(a, b)


def hide_tags_folder(entry: SortableEntry) -> bool:
    """Return ``False`` for the generated ``tags`` folder, ``True`` otherwise."""
    return _entry_is_file(entry) or _entry_name(entry) != TAGS_FOLDER


def sort_entries(
    entries: cabc.Iterable[SortableEntry], sort_fn: Comparator = explorer_sort
) -> list[typ.Any]:
    """Return ``entries`` as a new list ordered by ``sort_fn``.

    The sort is stable, so ties keep their input order.
    """
    return sorted(entries, key=functools.cmp_to_key(sort_fn))


def sort_tree(
    entry: NavEntry,
    sort_fn: Comparator = explorer_sort,
    filter_fn: EntryFilter | None = None,
) -> NavEntry:
    """Return a copy of ``entry`` with every folder's children ordered.

    Parameters
    ----------
    entry : NavEntry
        Root of the tree to order. It is not modified.
    sort_fn : Comparator, optional
        Comparator applied to each sibling group; defaults to
        :func:`explorer_sort`.
    filter_fn : EntryFilter, optional
        Predicate applied before sorting; children for which it returns
        ``False`` are dropped together with their subtrees.

    Returns
    -------
    NavEntry
        A new tree with the same nodes, filtered and ordered.
    """
    children: cabc.Iterable[NavEntry] = entry.children
    if filter_fn is not None:
        children = [child for child in children if filter_fn(child)]
    ordered = sort_entries(
        (sort_tree(child, sort_fn, filter_fn) for child in children), sort_fn
    )
    return dc.replace(entry, children=tuple(ordered))


__all__ = [
    "ORDER_RANK",
    "Comparator",
    "EntryFilter",
    "NavEntry",
    "SortableEntry",
    "chain_comparators",
    "compare_by_kind",
    "compare_by_name",
    "compare_by_rank",
    "default_sort",
    "explorer_sort",
    "hide_tags_folder",
    "natural_key",
    "sort_entries",
    "sort_tree",
]
