"""Substring filter that turns the item universe into the displayed list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, Sequence

from ic_ui.tui.system.models import Entry, K


@dataclass(frozen=True)
class FilterResult(Generic[K]):
    """Ordered view over ``source`` made of stable positions, not copies.

    ``source`` is whichever list drove the recomputation: the item universe
    or the default list.
    """

    source: Sequence[Entry[K]]
    indices: tuple[int, ...]

    def __len__(self) -> int:
        return len(self.indices)

    def __getitem__(self, position: int) -> Entry[K]:
        return self.source[self.indices[position]]

    def __iter__(self) -> Iterator[Entry[K]]:
        for index in self.indices:
            yield self.source[index]

    @property
    def entries(self) -> list[Entry[K]]:
        return list(self)

    def keys(self) -> list[K]:
        return [entry.key for entry in self]

    def names(self) -> list[str]:
        return [entry.name for entry in self]


def split_terms(search_text: str) -> list[str]:
    """Lower-case the search text and split it into trimmed comma terms.

    Empty terms are kept: they match every name.
    """
    return [term.strip() for term in search_text.lower().split(",")]


def matches_terms(name: str, terms: Sequence[str]) -> bool:
    lowered = name.lower()
    return all(term in lowered for term in terms)


def filter_entries(
    items: Sequence[Entry[K]],
    search_text: str,
    default_list: Sequence[Entry[K]] | None = None,
) -> FilterResult[K]:
    """Compute the displayed list for ``search_text``.

    An empty search with a default list returns that list untouched. Any
    other input keeps the items whose name contains every term and sorts
    them by name; ``sorted`` is stable so equal names keep source order.
    """
    if not search_text and default_list is not None:
        return FilterResult(default_list, tuple(range(len(default_list))))

    terms = split_terms(search_text)
    hits = [idx for idx, entry in enumerate(items) if matches_terms(entry.name, terms)]
    hits = sorted(hits, key=lambda idx: items[idx].name)
    return FilterResult(items, tuple(hits))
