"""Reference cards: model, storage, queries and transfer."""

from .codec import decode_cards, encode_cards
from .events import EventEmitter, StoreAction, StoreEvent
from .models import CardCategory, ReferenceCard
from .query import LibraryStats
from .samples import sample_cards
from .store import CardStore
from .transfer import CardExporter

__all__ = [
    "CardCategory",
    "CardExporter",
    "CardStore",
    "EventEmitter",
    "LibraryStats",
    "ReferenceCard",
    "StoreAction",
    "StoreEvent",
    "decode_cards",
    "encode_cards",
    "sample_cards",
]
