import pytest

from ic_ui.tui.system.components.list_filter import (
    FilterResult,
    filter_entries,
    matches_terms,
    split_terms,
)
from ic_ui.tui.system.models import Entry

pytestmark = pytest.mark.unit_ui

ITEMS = [
    Entry(key="a", name="Alpha"),
    Entry(key="b", name="Beta"),
    Entry(key="c", name="Gamma"),
]


def test_empty_search_without_default_list_shows_all_items_sorted() -> None:
    items = [ITEMS[2], ITEMS[0], ITEMS[1]]

    result = filter_entries(items, "")

    assert result.names() == ["Alpha", "Beta", "Gamma"]


def test_comma_terms_must_all_match() -> None:
    result = filter_entries(ITEMS, "a,m")

    assert result.keys() == ["c"]


def test_terms_are_trimmed_and_case_insensitive() -> None:
    result = filter_entries(ITEMS, "  AL ,  PH ")

    assert result.names() == ["Alpha"]


def test_empty_terms_match_everything() -> None:
    assert split_terms("beta,,") == ["beta", "", ""]
    assert filter_entries(ITEMS, "beta,,").keys() == ["b"]
    assert filter_entries(ITEMS, ",").names() == ["Alpha", "Beta", "Gamma"]


def test_blank_term_matches_all_but_inner_spaces_count() -> None:
    items = [Entry(key=1, name="cargo build"), Entry(key=2, name="cargo")]

    assert filter_entries(items, " ").keys() == [2, 1]
    assert filter_entries(items, "o b").keys() == [1]


def test_default_list_is_returned_verbatim_for_empty_search() -> None:
    history = [ITEMS[2], ITEMS[0]]

    result = filter_entries(ITEMS, "", history)

    assert result.source is history
    assert result.names() == ["Gamma", "Alpha"]


def test_default_list_is_ignored_once_search_text_is_typed() -> None:
    history = [ITEMS[2]]

    result = filter_entries(ITEMS, "a", history)

    assert result.source is ITEMS
    assert result.names() == ["Alpha", "Beta", "Gamma"]


def test_empty_default_list_still_replaces_items() -> None:
    assert len(filter_entries(ITEMS, "", [])) == 0


def test_sort_is_case_sensitive_and_stable_for_equal_names() -> None:
    items = [
        Entry(key="x2", name="same"),
        Entry(key="up", name="Same"),
        Entry(key="x1", name="same"),
        Entry(key="x0", name="same"),
    ]

    result = filter_entries(items, "same")

    assert result.keys() == ["up", "x2", "x1", "x0"]


def test_every_result_contains_every_term() -> None:
    items = [Entry(key=i, name=name) for i, name in enumerate(
        ["Cargo build", "cargo run", "Build docs", "apt update", "RUN tests"]
    )]
    search = "U, r"
    terms = split_terms(search)

    result = filter_entries(items, search)

    assert result.names() == ["Cargo build", "RUN tests", "cargo run"]
    assert all(matches_terms(name, terms) for name in result.names())


def test_recomputation_is_idempotent() -> None:
    first = filter_entries(ITEMS, "a")
    second = filter_entries(ITEMS, "a")

    assert first.indices == second.indices
    assert first.entries == second.entries


def test_filter_result_indexes_into_its_source() -> None:
    result = FilterResult(ITEMS, (2, 0))

    assert len(result) == 2
    assert result[0] is ITEMS[2]
    assert list(result) == [ITEMS[2], ITEMS[0]]
    assert not FilterResult(ITEMS, ())
