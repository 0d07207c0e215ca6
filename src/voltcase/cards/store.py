"""JSON file storage for reference cards."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable

from ..errors import CardDecodeError, CardNotFoundError, StorageWriteError
from .codec import decode_cards, encode_cards
from .events import EventEmitter, Listener, StoreAction, StoreEvent
from .models import ReferenceCard
from .samples import sample_cards

logger = logging.getLogger(__name__)


class CardStore:
    """Owns the card collection and its on-disk mirror.

    Every mutation updates the in-memory list first and then rewrites the
    whole collection to a single JSON file. The file is replaced atomically,
    so it always holds a complete snapshot.
    """

    def __init__(self, path: Path, seed_samples: bool = True) -> None:
        """Initialize the store with the path of the collection file.

        Args:
            path: Path to the JSON collection file.
            seed_samples: Seed the sample cards when no readable file exists.
        """
        self.path = path
        self.seed_samples = seed_samples
        self._cards: list[ReferenceCard] = []
        self._events = EventEmitter()

    def subscribe(self, listener: Listener) -> None:
        """Register a listener for store events."""
        self._events.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener."""
        self._events.unsubscribe(listener)

    def load(self) -> None:
        """Load the collection from disk.

        A missing or unreadable file is not an error: the store falls back
        to the sample cards and writes them out for the next run. Never raises.
        """
        try:
            cards = decode_cards(self.path.read_bytes())
        except FileNotFoundError:
            logger.debug("No card file at %s, seeding", self.path)
            self._seed()
            return
        except (OSError, CardDecodeError) as e:
            logger.warning("Cannot read cards from %s: %s. Seeding.", self.path, e)
            self._seed()
            return

        self._cards = _unique_by_id(cards)
        if len(self._cards) != len(cards):
            logger.warning(
                "Dropped %d cards with duplicate ids from %s",
                len(cards) - len(self._cards),
                self.path,
            )
        self._events.emit(
            StoreEvent(StoreAction.LOADED, total=len(self._cards))
        )

    def snapshot(self) -> tuple[ReferenceCard, ...]:
        """Current cards in collection order."""
        return tuple(self._cards)

    def get(self, card_id: str) -> ReferenceCard | None:
        """Get a card by id, or None."""
        index = self._index_of(card_id)
        return None if index is None else self._cards[index]

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return any(card.id == card_id for card in self._cards)

    def add(self, card: ReferenceCard) -> ReferenceCard:
        """Append a card and persist.

        Raises:
            StorageWriteError: If the collection could not be written.
        """
        self._cards.append(card)
        self._commit(StoreEvent(StoreAction.ADDED, (card.id,), len(self._cards)))
        return card

    def update(self, card: ReferenceCard) -> ReferenceCard:
        """Replace the card with the same id, keeping its position.

        Raises:
            CardNotFoundError: If no card has this id.
            StorageWriteError: If the collection could not be written.
        """
        index = self._require_index(card.id)
        self._cards[index] = card
        self._commit(StoreEvent(StoreAction.UPDATED, (card.id,), len(self._cards)))
        return card

    def delete(self, card_id: str) -> None:
        """Remove the card with this id and persist.

        Raises:
            CardNotFoundError: If no card has this id.
            StorageWriteError: If the collection could not be written.
        """
        self._require_index(card_id)
        self._cards = [card for card in self._cards if card.id != card_id]
        self._commit(StoreEvent(StoreAction.DELETED, (card_id,), len(self._cards)))

    def toggle_favorite(self, card_id: str) -> ReferenceCard:
        """Flip the favorite flag of a card and persist.

        Returns:
            The updated card.

        Raises:
            CardNotFoundError: If no card has this id.
            StorageWriteError: If the collection could not be written.
        """
        index = self._require_index(card_id)
        card = self._cards[index].toggled_favorite()
        self._cards[index] = card
        self._commit(
            StoreEvent(StoreAction.FAVORITE_TOGGLED, (card_id,), len(self._cards))
        )
        return card

    def merge(self, cards: Iterable[ReferenceCard]) -> int:
        """Append cards whose id is not yet in the collection.

        Existing cards are never overwritten or removed.

        Returns:
            Number of cards added.

        Raises:
            StorageWriteError: If the collection could not be written.
        """
        known = {card.id for card in self._cards}
        added: list[str] = []
        for card in cards:
            if card.id in known:
                continue
            self._cards.append(card)
            known.add(card.id)
            added.append(card.id)

        self._commit(StoreEvent(StoreAction.MERGED, tuple(added), len(self._cards)))
        return len(added)

    def save(self) -> None:
        """Write the full collection to disk.

        The data goes to a temporary file in the same directory, which then
        replaces the collection file.

        Raises:
            StorageWriteError: If the file could not be written.
        """
        payload = encode_cards(self._cards)
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error("Failed to save cards to %s: %s", self.path, e)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(f"Failed to save cards to {self.path}: {e}") from e

    def _seed(self) -> None:
        self._cards = sample_cards() if self.seed_samples else []
        try:
            self._commit(
                StoreEvent(
                    StoreAction.SEEDED,
                    tuple(card.id for card in self._cards),
                    len(self._cards),
                )
            )
        except StorageWriteError:
            # Already logged; the session keeps working from memory.
            pass

    def _commit(self, event: StoreEvent) -> None:
        self.save()
        self._events.emit(event)

    def _index_of(self, card_id: str) -> int | None:
        for index, card in enumerate(self._cards):
            if card.id == card_id:
                return index
        return None

    def _require_index(self, card_id: str) -> int:
        index = self._index_of(card_id)
        if index is None:
            raise CardNotFoundError(card_id)
        return index


def _unique_by_id(cards: list[ReferenceCard]) -> list[ReferenceCard]:
    seen: set[str] = set()
    unique = []
    for card in cards:
        if card.id not in seen:
            seen.add(card.id)
            unique.append(card)
    return unique
