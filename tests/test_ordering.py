"""Unit tests for the explorer ordering policy.

These tests cover each comparator tier on its own, the chained
``explorer_sort`` comparator, and the sibling/tree sorting helpers built on
top of it.

Usage
-----
Run ``pytest tests/test_ordering.py -v`` to execute the suite. No fixtures
are required.
"""

from __future__ import annotations

import itertools
import typing as typ
from types import SimpleNamespace

import pytest

from funcs_pages.ordering import (
    ORDER_RANK,
    NavEntry,
    chain_comparators,
    compare_by_kind,
    compare_by_name,
    compare_by_rank,
    default_sort,
    explorer_sort,
    hide_tags_folder,
    natural_key,
    sort_entries,
    sort_tree,
)

if typ.TYPE_CHECKING:
    from pytest_mock import MockerFixture


def _file(name: str) -> NavEntry:
    return NavEntry(name, is_file=True)


def _folder(name: str, *children: NavEntry) -> NavEntry:
    return NavEntry(name, is_file=False, children=children)


@pytest.mark.parametrize(
    ("left", "right"), list(itertools.permutations(ORDER_RANK, 2))
)
def test_ranked_pairs_follow_rank_difference(left: str, right: str) -> None:
    """Two ranked names compare by the difference of their ranks."""
    a, b = _file(left), _folder(right)
    expected = ORDER_RANK[left] - ORDER_RANK[right]
    assert explorer_sort(a, b) == expected, (
        f"expected rank difference {expected} for {left!r} vs {right!r}"
    )
    assert explorer_sort(a, b) == -explorer_sort(b, a), "expected antisymmetry"


def test_ranked_entry_precedes_unranked_entry() -> None:
    """A ranked file beats an unranked folder despite the kind tier."""
    ranked = _file("ch1-5")
    unranked = _folder("aardvark")
    assert explorer_sort(ranked, unranked) < 0
    assert explorer_sort(unranked, ranked) > 0


def test_rank_tier_ties_when_neither_name_is_ranked() -> None:
    assert compare_by_rank(_file("alpha"), _file("beta")) == 0


def test_rank_tier_accepts_custom_table() -> None:
    rank = {"b": 0, "a": 1}
    assert compare_by_rank(_file("b"), _file("a"), rank) < 0


def test_folder_precedes_file_when_unranked() -> None:
    """Folders come before files once the rank tier has no opinion."""
    folder = _folder("zeta")
    page = _file("alpha")
    assert explorer_sort(folder, page) < 0
    assert explorer_sort(page, folder) > 0


def test_kind_tier_ties_for_same_kind() -> None:
    assert compare_by_kind(_file("a"), _file("b")) == 0
    assert compare_by_kind(_folder("a"), _folder("b")) == 0


@pytest.mark.parametrize(
    ("left", "right"),
    [
        ("ch2", "ch10"),
        ("alpha", "Zeta"),
        ("Alpha", "beta"),
        ("week9-notes", "week10-notes"),
        ("", "a"),
        ("1-intro", "intro"),
        ("ch1", "ch1-1"),
        ("ch1-1", "ch1a"),
        ("lab-notes", "lab1"),
        ("lab", "lab-notes"),
        ("a_b", "a-b"),
        ("a~", "ab"),
        ("x 2", "x1"),
        ("notes-v10", "notes.v2"),
        ("unit 9", "unit-1"),
    ],
)
def test_name_tier_is_natural_and_case_insensitive(left: str, right: str) -> None:
    """Unranked entries of one kind sort by a natural, case-insensitive order."""
    assert explorer_sort(_file(left), _file(right)) < 0, (
        f"expected {left!r} to sort before {right!r}"
    )
    assert explorer_sort(_file(right), _file(left)) > 0


def test_name_tier_ignores_case_and_accents() -> None:
    assert compare_by_name(_file("Résumé"), _file("resume")) == 0
    assert compare_by_name(_file("NOTES"), _file("notes")) == 0


def test_natural_key_groups_digit_runs() -> None:
    assert natural_key("Lab12-b3") == (
        (2, "l"),
        (2, "a"),
        (2, "b"),
        (1, 12),
        (0, natural_key("-")[0][1]),
        (2, "b"),
        (1, 3),
    )


def test_natural_key_orders_character_classes() -> None:
    """Spaces and punctuation precede digits, which precede letters."""
    space, dash, digit, letter = (natural_key(ch)[0] for ch in (" ", "-", "7", "a"))
    assert space < dash < digit < letter


def test_missing_names_compare_as_empty() -> None:
    """Entries without a usable name never raise."""
    nameless = SimpleNamespace(name=None, is_file=True)
    blank = SimpleNamespace(is_file=True)
    named = SimpleNamespace(name="a", is_file=True)
    assert explorer_sort(nameless, blank) == 0
    assert explorer_sort(nameless, named) < 0


def test_chain_comparators_short_circuits(mocker: MockerFixture) -> None:
    """Later comparators are not consulted once one decides."""
    first = mocker.Mock(return_value=-3)
    second = mocker.Mock(return_value=5)
    chained = chain_comparators(first, second)
    assert chained("a", "b") == -3
    second.assert_not_called()


def test_chain_comparators_ties_when_all_tie() -> None:
    chained = chain_comparators(lambda a, b: 0, lambda a, b: 0)
    assert chained("a", "b") == 0


def test_sort_entries_orders_chapter_slugs() -> None:
    entries = [_file(n) for n in ["ch1-3", "index", "ch1-1", "ch0", "ch1"]]
    ordered = [entry.name for entry in sort_entries(entries)]
    assert ordered == ["index", "ch0", "ch1", "ch1-1", "ch1-3"]


def test_sort_entries_mixes_all_tiers() -> None:
    entries = [
        _file("zeta"),
        _folder("labs"),
        _file("ch1"),
        _file("Alpha"),
        _folder("appendix"),
        _file("index"),
    ]
    ordered = [entry.name for entry in sort_entries(entries)]
    assert ordered == ["index", "ch1", "appendix", "labs", "Alpha", "zeta"]


def test_sort_entries_is_stable_for_ties() -> None:
    first = _file("Notes")
    second = _file("notes")
    assert sort_entries([first, second]) == [first, second]
    assert sort_entries([second, first]) == [second, first]


def test_default_sort_ignores_rank_table() -> None:
    entries = [_file("index"), _folder("labs"), _file("ch0")]
    ordered = [entry.name for entry in sort_entries(entries, default_sort)]
    assert ordered == ["labs", "ch0", "index"]


def test_sort_tree_orders_every_level_without_mutation() -> None:
    """Each folder's children are ordered recursively into a new tree."""
    chapter = _folder("ch1", _file("ch1-3"), _file("ch1-1"), _file("ch1-2"))
    root = _folder("", _file("zeta"), chapter, _file("index"), _folder("tags"))

    ordered = sort_tree(root, filter_fn=hide_tags_folder)

    assert [child.name for child in ordered.children] == ["index", "ch1", "zeta"]
    assert [child.name for child in ordered.children[1].children] == [
        "ch1-1",
        "ch1-2",
        "ch1-3",
    ]
    assert [child.name for child in root.children] == ["zeta", "ch1", "index", "tags"]


def test_hide_tags_folder_keeps_tags_file() -> None:
    assert hide_tags_folder(_folder("tags")) is False
    assert hide_tags_folder(_file("tags")) is True
    assert hide_tags_folder(_folder("labs")) is True


def test_order_rank_is_read_only() -> None:
    with pytest.raises(TypeError):
        ORDER_RANK["ch2"] = 8  # type: ignore[index]
    assert len(set(ORDER_RANK.values())) == len(ORDER_RANK)
