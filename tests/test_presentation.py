"""Tests for the presentation deck."""

import pytest

from voltcase import PresentationDeck, ReferenceCard


def _cards(count: int) -> list[ReferenceCard]:
    return [
        ReferenceCard(title=f"Card {i}", content="c", category="Quick Reference")
        for i in range(count)
    ]


class TestNavigation:
    def test_starts_at_first_card(self):
        cards = _cards(3)
        deck = PresentationDeck(cards)
        assert deck.current == cards[0]
        assert deck.position_label == "1 / 3"
        assert not deck.has_previous
        assert deck.has_next

    def test_next_and_previous(self):
        cards = _cards(3)
        deck = PresentationDeck(cards)
        assert deck.next()
        assert deck.next()
        assert deck.current == cards[2]
        assert not deck.next()
        assert deck.index == 2
        assert deck.previous()
        assert deck.position_label == "2 / 3"

    def test_previous_at_start(self):
        deck = PresentationDeck(_cards(2))
        assert not deck.previous()
        assert deck.index == 0

    def test_start_is_clamped(self):
        assert PresentationDeck(_cards(3), start=10).index == 2
        assert PresentationDeck(_cards(3), start=-4).index == 0

    def test_empty_deck(self):
        deck = PresentationDeck([])
        assert deck.current is None
        assert deck.position_label == "0 / 0"
        assert not deck.next()
        assert not deck.previous()
        assert deck.indicator_indices() == []

    def test_deck_copies_cards(self):
        cards = _cards(2)
        deck = PresentationDeck(cards)
        cards.clear()
        assert len(deck) == 2


class TestIndicators:
    def test_small_deck_shows_all(self):
        assert PresentationDeck(_cards(4)).indicator_indices() == [0, 1, 2, 3]

    @pytest.mark.parametrize(
        "index,expected",
        [
            (0, [0, 1, 2, 3, 4]),
            (2, [0, 1, 2, 3, 4]),
            (3, [1, 2, 3, 4, 5]),
            (5, [3, 4, 5, 6, 7]),
            (7, [3, 4, 5, 6, 7]),
        ],
    )
    def test_window_follows_current(self, index: int, expected: list[int]):
        deck = PresentationDeck(_cards(8), start=index)
        assert deck.indicator_indices() == expected

    def test_invalid_window(self):
        with pytest.raises(ValueError, match="at least 1"):
            PresentationDeck(_cards(3)).indicator_indices(window=0)
