"""JSON encoding for card collections.

The same encoding is used for the primary storage file and for JSON
exports, so an export can be imported back without loss.
"""

import json
from datetime import datetime, timezone
from typing import Any, Iterable

from ..errors import CardDecodeError
from .models import ReferenceCard

_REQUIRED_TEXT_FIELDS = ("id", "title", "content", "category")


def card_to_dict(card: ReferenceCard) -> dict[str, Any]:
    """Convert a card to its wire dictionary (camelCase keys)."""
    data: dict[str, Any] = {
        "id": card.id,
        "title": card.title,
        "content": card.content,
        "category": card.category,
        "isFavorite": card.is_favorite,
        "createdAt": card.created_at.isoformat(),
        "updatedAt": card.updated_at.isoformat(),
    }
    if card.tags is not None:
        data["tags"] = card.tags
    return data


def card_from_dict(data: Any) -> ReferenceCard:
    """Build a card from its wire dictionary.

    Raises:
        CardDecodeError: If a field is missing or has the wrong type.
    """
    if not isinstance(data, dict):
        raise CardDecodeError(f"Expected an object, got {type(data).__name__}")

    for key in _REQUIRED_TEXT_FIELDS:
        if not isinstance(data.get(key), str):
            raise CardDecodeError(f"Field '{key}' must be a string")

    if not isinstance(data.get("isFavorite"), bool):
        raise CardDecodeError("Field 'isFavorite' must be a boolean")

    tags = data.get("tags")
    if tags is not None and not isinstance(tags, str):
        raise CardDecodeError("Field 'tags' must be a string")

    return ReferenceCard(
        id=data["id"],
        title=data["title"],
        content=data["content"],
        category=data["category"],
        is_favorite=data["isFavorite"],
        tags=tags,
        created_at=_parse_timestamp(data.get("createdAt"), "createdAt"),
        updated_at=_parse_timestamp(data.get("updatedAt"), "updatedAt"),
    )


def encode_cards(cards: Iterable[ReferenceCard]) -> str:
    """Encode cards as a JSON array."""
    return json.dumps(
        [card_to_dict(card) for card in cards], indent=2, ensure_ascii=False
    )


def decode_cards(text: str | bytes) -> list[ReferenceCard]:
    """Decode a JSON array of cards.

    Raises:
        CardDecodeError: If the payload is not a JSON array of valid cards.
    """
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CardDecodeError(f"Invalid JSON: {e}") from e
    except RecursionError as e:
        raise CardDecodeError("Invalid JSON: nested too deeply") from e

    if not isinstance(data, list):
        raise CardDecodeError("Expected a JSON array of cards")

    return [card_from_dict(item) for item in data]


def _parse_timestamp(value: Any, key: str) -> datetime:
    if not isinstance(value, str):
        raise CardDecodeError(f"Field '{key}' must be an ISO 8601 string")

    text = value
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise CardDecodeError(f"Field '{key}' is not a valid timestamp: {value}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
