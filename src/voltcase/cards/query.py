"""Read-only views over a card collection.

All functions take a sequence of cards (usually a store snapshot) and
return results in collection order. Nothing here ranks by relevance.
"""

import unicodedata
from collections import Counter
from dataclasses import dataclass, field
from operator import attrgetter
from typing import Sequence

from .models import ReferenceCard


@dataclass(frozen=True)
class LibraryStats:
    """Counts shown on the overview and export screens."""

    total: int
    favorite_count: int
    category_counts: dict[str, int] = field(default_factory=dict)
    oldest: ReferenceCard | None = None
    newest: ReferenceCard | None = None

    @property
    def categories_used(self) -> int:
        return len(self.category_counts)


def by_category(cards: Sequence[ReferenceCard], label: str) -> list[ReferenceCard]:
    """Cards whose category equals the label exactly."""
    return [card for card in cards if card.category == label]


def favorites(cards: Sequence[ReferenceCard]) -> list[ReferenceCard]:
    """Cards marked as favorite."""
    return [card for card in cards if card.is_favorite]


def fold(text: str) -> str:
    """Normalize text for case-insensitive matching."""
    return unicodedata.normalize("NFKC", text).casefold()


def matches(card: ReferenceCard, query: str) -> bool:
    """Whether title, content or tags contain the query, ignoring case."""
    needle = fold(query)
    return (
        needle in fold(card.title)
        or needle in fold(card.content)
        or (card.tags is not None and needle in fold(card.tags))
    )


def search(cards: Sequence[ReferenceCard], query: str) -> list[ReferenceCard]:
    """Cards matching the query. An empty query returns every card."""
    if not query:
        return list(cards)
    return [card for card in cards if matches(card, query)]


def filter_cards(
    cards: Sequence[ReferenceCard],
    category: str | None = None,
    query: str = "",
) -> list[ReferenceCard]:
    """Apply the category filter and the search together.

    Both conditions must hold; a non-empty query narrows the selected
    category instead of replacing it.
    """
    selected = list(cards) if category is None else by_category(cards, category)
    return search(selected, query)


def category_counts(cards: Sequence[ReferenceCard]) -> dict[str, int]:
    """Map each category label present in the cards to its count."""
    return dict(Counter(card.category for card in cards))


def stats(cards: Sequence[ReferenceCard]) -> LibraryStats:
    """Totals plus the oldest and newest card by creation time."""
    return LibraryStats(
        total=len(cards),
        favorite_count=len(favorites(cards)),
        category_counts=category_counts(cards),
        oldest=min(cards, key=attrgetter("created_at"), default=None),
        newest=max(cards, key=attrgetter("created_at"), default=None),
    )
