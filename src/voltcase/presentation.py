"""Presentation mode: step through cards one at a time."""

from typing import Sequence

from .cards.models import ReferenceCard

INDICATOR_WINDOW = 5


class PresentationDeck:
    """Cursor over a fixed list of cards.

    The deck holds its own copy of the cards, so later changes to the
    library do not move the cursor.
    """

    def __init__(self, cards: Sequence[ReferenceCard], start: int = 0) -> None:
        self.cards = list(cards)
        self.index = min(max(start, 0), max(len(self.cards) - 1, 0))

    def __len__(self) -> int:
        return len(self.cards)

    @property
    def current(self) -> ReferenceCard | None:
        if not self.cards:
            return None
        return self.cards[self.index]

    @property
    def has_next(self) -> bool:
        return self.index < len(self.cards) - 1

    @property
    def has_previous(self) -> bool:
        return self.index > 0

    @property
    def position_label(self) -> str:
        """Position shown to the presenter, e.g. "3 / 8"."""
        if not self.cards:
            return "0 / 0"
        return f"{self.index + 1} / {len(self.cards)}"

    def next(self) -> bool:
        """Advance one card. Returns False at the last card."""
        if not self.has_next:
            return False
        self.index += 1
        return True

    def previous(self) -> bool:
        """Go back one card. Returns False at the first card."""
        if not self.has_previous:
            return False
        self.index -= 1
        return True

    def indicator_indices(self, window: int = INDICATOR_WINDOW) -> list[int]:
        """Indices of the cards shown as page dots.

        At most `window` dots are shown, centred on the current card and
        clamped so the window never runs past either end of the deck.
        """
        if window < 1:
            raise ValueError("window must be at least 1")
        count = len(self.cards)
        if count <= window:
            return list(range(count))
        start = max(0, min(self.index - window // 2, count - window))
        return list(range(start, start + window))
