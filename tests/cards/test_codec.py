"""Tests for the JSON card codec."""

import json
from datetime import datetime, timezone

import pytest

from voltcase.cards import ReferenceCard, decode_cards, encode_cards, sample_cards
from voltcase.cards.codec import card_from_dict, card_to_dict
from voltcase.errors import CardDecodeError


def _valid_dict(**overrides) -> dict:
    data = {
        "id": "0b7c8a52-4f3e-4a53-9d6e-0f3a3a5a9c01",
        "title": "Git Reset Commands",
        "content": "git reset --soft HEAD~1",
        "category": "Command Line",
        "isFavorite": False,
        "createdAt": "2025-01-20T10:30:00+00:00",
        "updatedAt": "2025-01-21T08:00:00+00:00",
        "tags": "git,version-control,reset",
    }
    data.update(overrides)
    return data


class TestEncode:
    def test_uses_wire_keys(self):
        """Encoded cards use camelCase keys."""
        card = ReferenceCard(title="t", content="c", category="x", is_favorite=True, tags="a")
        data = card_to_dict(card)
        assert set(data) == {
            "id",
            "title",
            "content",
            "category",
            "isFavorite",
            "createdAt",
            "updatedAt",
            "tags",
        }
        assert data["isFavorite"] is True

    def test_omits_missing_tags(self):
        card = ReferenceCard(title="t", content="c", category="x")
        assert "tags" not in card_to_dict(card)

    def test_encode_is_json_array(self):
        payload = json.loads(encode_cards(sample_cards()))
        assert isinstance(payload, list)
        assert len(payload) == 8


class TestRoundTrip:
    def test_round_trip_preserves_every_field(self):
        """decode(encode(cards)) equals the original cards."""
        cards = sample_cards() + [
            ReferenceCard(title="Ünïcode ✓", content="línea\nzwei", category="Retired")
        ]
        assert decode_cards(encode_cards(cards)) == cards

    def test_round_trip_preserves_order(self):
        cards = sample_cards()
        assert [c.id for c in decode_cards(encode_cards(cards))] == [c.id for c in cards]

    def test_empty_collection(self):
        assert decode_cards(encode_cards([])) == []


class TestDecode:
    def test_decode_valid(self):
        card = card_from_dict(_valid_dict())
        assert card.id == "0b7c8a52-4f3e-4a53-9d6e-0f3a3a5a9c01"
        assert card.created_at == datetime(2025, 1, 20, 10, 30, tzinfo=timezone.utc)
        assert card.tags == "git,version-control,reset"

    def test_accepts_zulu_suffix(self):
        card = card_from_dict(_valid_dict(createdAt="2025-01-20T10:30:00Z"))
        assert card.created_at == datetime(2025, 1, 20, 10, 30, tzinfo=timezone.utc)

    def test_naive_timestamp_is_utc(self):
        card = card_from_dict(_valid_dict(updatedAt="2025-01-20T10:30:00"))
        assert card.updated_at.tzinfo == timezone.utc

    def test_missing_tags_is_none(self):
        data = _valid_dict()
        del data["tags"]
        assert card_from_dict(data).tags is None

    def test_null_tags_is_none(self):
        assert card_from_dict(_valid_dict(tags=None)).tags is None

    def test_accepts_bytes(self):
        payload = json.dumps([_valid_dict()]).encode("utf-8")
        assert len(decode_cards(payload)) == 1

    def test_rejects_deeply_nested_payload(self):
        with pytest.raises(CardDecodeError):
            decode_cards("[" * 100000)

    @pytest.mark.parametrize(
        "payload",
        [
            "not json",
            "",
            '{"id": "x"}',
            "[1, 2]",
            '[{"title": "missing everything else"}]',
        ],
    )
    def test_rejects_malformed_payloads(self, payload: str):
        with pytest.raises(CardDecodeError):
            decode_cards(payload)

    @pytest.mark.parametrize(
        "overrides",
        [
            {"id": 42},
            {"title": None},
            {"isFavorite": "yes"},
            {"tags": ["git"]},
            {"createdAt": 1737369000},
            {"updatedAt": "yesterday"},
        ],
    )
    def test_rejects_bad_field_types(self, overrides: dict):
        with pytest.raises(CardDecodeError):
            card_from_dict(_valid_dict(**overrides))
