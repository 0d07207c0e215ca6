"""Card library: the interface UI code talks to.

CardLibrary coordinates the store, the query functions and the exporter.
Every mutating or file operation returns an OperationResult instead of
raising, so a failure can be shown as a status message.
"""

import asyncio
import logging
from pathlib import Path
from typing import Callable, Sequence

from .cards import query
from .cards.models import ReferenceCard
from .cards.query import LibraryStats
from .cards.store import CardStore
from .cards.transfer import CardExporter
from .errors import CardDecodeError, CardNotFoundError, StorageWriteError
from .logging import ActivityLogger
from .presentation import PresentationDeck
from .results import OperationResult, ResultStatus

logger = logging.getLogger(__name__)


def normalize_text(value: str) -> str:
    return value.strip()


def normalize_tags(tags: str | None) -> str | None:
    """Trim tags; blank tags become None."""
    if tags is None:
        return None
    tags = tags.strip()
    return tags or None


class CardLibrary:
    """Orchestrates card operations for the UI.

    The library is the single owner of its store. Async transfer methods
    run file work in a worker thread, one at a time.
    """

    BUSY_MESSAGE = "An export or import is already running"

    def __init__(
        self,
        store: CardStore,
        exporter: CardExporter,
        activity: ActivityLogger | None = None,
    ) -> None:
        """Initialize the library.

        Args:
            store: The loaded CardStore that owns the collection.
            exporter: Writes and reads export files.
            activity: Optional activity log; subscribed to store events.
        """
        self.store = store
        self.exporter = exporter
        self.activity = activity
        self._transfer_lock = asyncio.Lock()

        if activity is not None:
            store.subscribe(activity.log_store_event)

    # Queries

    def list_all(self) -> list[ReferenceCard]:
        return list(self.store.snapshot())

    def list_favorites(self) -> list[ReferenceCard]:
        return query.favorites(self.store.snapshot())

    def list_by_category(self, label: str) -> list[ReferenceCard]:
        return query.by_category(self.store.snapshot(), label)

    def search(self, text: str) -> list[ReferenceCard]:
        return query.search(self.store.snapshot(), text)

    def filter(self, category: str | None = None, query_text: str = "") -> list[ReferenceCard]:
        """Cards in the category (if any) that also match the search text."""
        return query.filter_cards(self.store.snapshot(), category, query_text)

    def get(self, card_id: str) -> ReferenceCard | None:
        return self.store.get(card_id)

    def stats(self) -> LibraryStats:
        return query.stats(self.store.snapshot())

    def presentation(self) -> PresentationDeck:
        """A deck over the current favorite cards."""
        return PresentationDeck(self.list_favorites())

    # Mutations

    def create(
        self,
        title: str,
        content: str,
        category: str,
        tags: str | None = None,
        favorite: bool = False,
    ) -> OperationResult:
        """Create a card and append it to the library.

        Title and content are trimmed and must not be blank.
        """
        title, content = normalize_text(title), normalize_text(content)
        if not title or not content:
            return OperationResult.failure(
                ResultStatus.INVALID, "Title and content are required"
            )

        card = ReferenceCard(
            title=title,
            content=content,
            category=category,
            is_favorite=favorite,
            tags=normalize_tags(tags),
        )
        return self._mutate(lambda: self.store.add(card), card_id=card.id, pending=card)

    def edit(
        self,
        card_id: str,
        title: str,
        content: str,
        category: str,
        tags: str | None = None,
    ) -> OperationResult:
        """Change the title, content, category and tags of a card."""
        title, content = normalize_text(title), normalize_text(content)
        if not title or not content:
            return OperationResult.failure(
                ResultStatus.INVALID, "Title and content are required"
            )

        existing = self.store.get(card_id)
        if existing is None:
            return self._not_found(card_id)

        card = existing.with_content(title, content, category, normalize_tags(tags))
        return self._mutate(lambda: self.store.update(card), card_id=card_id, pending=card)

    def remove(self, card_id: str) -> OperationResult:
        """Delete a card."""
        return self._mutate(lambda: self.store.delete(card_id), card_id=card_id)

    def toggle_favorite(self, card_id: str) -> OperationResult:
        """Star or unstar a card."""
        return self._mutate(
            lambda: self.store.toggle_favorite(card_id),
            card_id=card_id,
            pending=lambda: self.store.get(card_id),
        )

    # Transfer

    def export_json(self) -> OperationResult:
        """Export every card to a JSON file. The value is the file path."""
        return self._export("json", self.exporter.export_json, self.store.snapshot())

    def export_text(self) -> OperationResult:
        """Export a human-readable report. The value is the file path."""
        return self._export("text", self.exporter.export_text, self.store.snapshot())

    def import_json(self, path: str | Path) -> OperationResult:
        """Import cards from a JSON export, adding only unknown ids.

        The value is the number of cards added. A file that cannot be read
        or decoded leaves the library unchanged.
        """
        try:
            cards = self.exporter.read_json(Path(path))
        except CardDecodeError as e:
            return self._import_failed(path, e)
        return self._merge(path, cards)

    async def export_json_async(self) -> OperationResult:
        """Like export_json, with the file write in a worker thread."""
        return await self._export_async("json", self.exporter.export_json)

    async def export_text_async(self) -> OperationResult:
        """Like export_text, with the file write in a worker thread."""
        return await self._export_async("text", self.exporter.export_text)

    async def import_json_async(self, path: str | Path) -> OperationResult:
        """Like import_json, reading and decoding in a worker thread.

        The merge itself runs back on the calling task.
        """
        if self._transfer_lock.locked():
            return OperationResult.failure(ResultStatus.BUSY, self.BUSY_MESSAGE)

        async with self._transfer_lock:
            try:
                cards = await asyncio.to_thread(self.exporter.read_json, Path(path))
            except CardDecodeError as e:
                return self._import_failed(path, e)
            return self._merge(path, cards)

    # Internals

    def _mutate(
        self,
        action: Callable[[], object],
        *,
        card_id: str,
        pending: ReferenceCard | Callable[[], ReferenceCard | None] | None = None,
    ) -> OperationResult:
        """Run a store mutation and convert store errors to results."""
        try:
            value = action()
        except CardNotFoundError:
            return self._not_found(card_id)
        except StorageWriteError as e:
            # The change is applied in memory even though the write failed.
            if callable(pending):
                pending = pending()
            return OperationResult.failure(ResultStatus.WRITE_FAILED, str(e), value=pending)
        return OperationResult.ok(value)

    def _not_found(self, card_id: str) -> OperationResult:
        logger.debug("Card %s not found", card_id)
        return OperationResult.failure(
            ResultStatus.NOT_FOUND, f"Card not found: {card_id}"
        )

    def _export(
        self,
        fmt: str,
        writer: Callable[[Sequence[ReferenceCard]], Path],
        cards: Sequence[ReferenceCard],
    ) -> OperationResult:
        try:
            path = writer(cards)
        except OSError as e:
            logger.error("Failed to export %s: %s", fmt, e)
            if self.activity is not None:
                self.activity.log_export(fmt, False, error=str(e))
            return OperationResult.failure(
                ResultStatus.EXPORT_FAILED, f"Failed to export {fmt}: {e}"
            )

        if self.activity is not None:
            self.activity.log_export(fmt, True, path=path, count=len(cards))
        return OperationResult.ok(path)

    async def _export_async(
        self, fmt: str, writer: Callable[[Sequence[ReferenceCard]], Path]
    ) -> OperationResult:
        if self._transfer_lock.locked():
            return OperationResult.failure(ResultStatus.BUSY, self.BUSY_MESSAGE)

        async with self._transfer_lock:
            cards = self.store.snapshot()
            return await asyncio.to_thread(self._export, fmt, writer, cards)

    def _merge(self, path: str | Path, cards: list[ReferenceCard]) -> OperationResult:
        try:
            added = self.store.merge(cards)
        except StorageWriteError as e:
            if self.activity is not None:
                self.activity.log_import(path, False, error=str(e))
            return OperationResult.failure(ResultStatus.WRITE_FAILED, str(e))

        if self.activity is not None:
            self.activity.log_import(path, True, added=added)
        return OperationResult.ok(added)

    def _import_failed(self, path: str | Path, error: Exception) -> OperationResult:
        logger.warning("Failed to import %s: %s", path, error)
        if self.activity is not None:
            self.activity.log_import(path, False, error=str(error))
        return OperationResult.failure(
            ResultStatus.IMPORT_FAILED, f"Failed to import {path}: {error}"
        )
