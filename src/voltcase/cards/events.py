"""Change notifications emitted by the card store."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

logger = logging.getLogger(__name__)


class StoreAction(Enum):
    """What happened to the collection."""

    LOADED = "loaded"
    SEEDED = "seeded"
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"
    FAVORITE_TOGGLED = "favorite_toggled"
    MERGED = "merged"


@dataclass(frozen=True)
class StoreEvent:
    """A change to the collection, emitted after it was written to disk."""

    action: StoreAction
    card_ids: tuple[str, ...] = ()
    total: int = 0
    extra: dict[str, object] = field(default_factory=dict)


Listener = Callable[[StoreEvent], None]


class EventEmitter:
    """Ordered list of listeners notified of store events."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        """Register a listener. Registering twice has no effect."""
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a listener if registered."""
        if listener in self._listeners:
            self._listeners.remove(listener)

    def emit(self, event: StoreEvent) -> None:
        """Notify every listener. A failing listener does not stop the rest."""
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception as e:
                logger.warning("Listener failed on %s: %s", event.action.value, e)

    def __len__(self) -> int:
        return len(self._listeners)
