"""Tests for card data models."""

import dataclasses
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from voltcase.cards import CardCategory, ReferenceCard


class TestReferenceCard:
    """Tests for the ReferenceCard dataclass."""

    def test_create_minimal(self):
        """A card can be created with title, content and category."""
        card = ReferenceCard(title="Docker", content="docker ps", category="Command Line")
        assert card.title == "Docker"
        assert card.is_favorite is False
        assert card.tags is None

    def test_id_is_uuid(self):
        """New cards get a UUID string id."""
        card = ReferenceCard(title="t", content="c", category="Build Flags")
        assert str(uuid.UUID(card.id)) == card.id

    def test_ids_are_unique(self):
        """Every card gets its own id."""
        ids = {ReferenceCard(title="t", content="c", category="x").id for _ in range(50)}
        assert len(ids) == 50

    def test_timestamps_are_utc(self):
        """created_at and updated_at are timezone-aware UTC."""
        card = ReferenceCard(title="t", content="c", category="x")
        assert card.created_at.tzinfo is not None
        assert card.created_at.utcoffset() == timedelta(0)
        assert card.updated_at >= card.created_at - timedelta(seconds=1)

    def test_is_frozen(self):
        """Cards cannot be mutated in place."""
        card = ReferenceCard(title="t", content="c", category="x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            card.title = "other"  # type: ignore[misc]

    def test_tag_list(self):
        """tag_list splits on commas and trims."""
        card = ReferenceCard(
            title="t", content="c", category="x", tags=" git, version-control ,, reset "
        )
        assert card.tag_list == ["git", "version-control", "reset"]

    def test_tag_list_empty(self):
        """Missing or blank tags give an empty list."""
        assert ReferenceCard(title="t", content="c", category="x").tag_list == []
        assert ReferenceCard(title="t", content="c", category="x", tags="  ").tag_list == []

    def test_category_info(self):
        """category_info resolves known labels and returns None otherwise."""
        known = ReferenceCard(title="t", content="c", category="Command Line")
        unknown = ReferenceCard(title="t", content="c", category="Retired Category")
        assert known.category_info is CardCategory.COMMAND_LINE
        assert unknown.category_info is None


class TestCardMutations:
    """Tests for copy-on-write mutations."""

    @pytest.fixture
    def old_card(self) -> ReferenceCard:
        past = datetime(2024, 1, 1, tzinfo=timezone.utc)
        return ReferenceCard(
            title="Old",
            content="old content",
            category="Documentation",
            created_at=past,
            updated_at=past,
        )

    def test_toggled_favorite(self, old_card: ReferenceCard):
        """toggled_favorite flips the flag and bumps updated_at."""
        toggled = old_card.toggled_favorite()
        assert toggled.is_favorite is True
        assert toggled.id == old_card.id
        assert toggled.created_at == old_card.created_at
        assert toggled.updated_at > old_card.updated_at
        assert old_card.is_favorite is False

    def test_toggle_twice_restores_flag(self, old_card: ReferenceCard):
        assert old_card.toggled_favorite().toggled_favorite().is_favorite is False

    def test_with_content(self, old_card: ReferenceCard):
        """with_content replaces the editable fields only."""
        edited = old_card.with_content("New", "new content", "Troubleshooting", "a,b")
        assert edited.id == old_card.id
        assert edited.created_at == old_card.created_at
        assert (edited.title, edited.content, edited.category, edited.tags) == (
            "New",
            "new content",
            "Troubleshooting",
            "a,b",
        )
        assert edited.updated_at > old_card.updated_at

    def test_updated_at_never_moves_backwards(self):
        """A card stamped in the future keeps its updated_at on mutation."""
        future = datetime.now(timezone.utc) + timedelta(days=1)
        card = ReferenceCard(title="t", content="c", category="x", updated_at=future)
        assert card.toggled_favorite().updated_at == future


class TestCardCategory:
    """Tests for the category catalog."""

    def test_has_ten_categories(self):
        assert len(CardCategory) == 10
        assert len(set(CardCategory.labels())) == 10

    def test_label_is_value(self):
        assert CardCategory.API_HEADERS.label == "API Headers"

    def test_icon_and_color(self):
        assert CardCategory.COMMAND_LINE.icon == "terminal"
        assert CardCategory.COMMAND_LINE.color == "#ffc700"
        assert all(category.icon and category.color.startswith("#") for category in CardCategory)

    def test_lookup_by_label(self):
        assert CardCategory.lookup("Error Codes") is CardCategory.ERROR_CODES

    def test_lookup_by_key(self):
        assert CardCategory.lookup("quick_reference") is CardCategory.QUICK_REFERENCE
        assert CardCategory.lookup("BUILD_FLAGS") is CardCategory.BUILD_FLAGS

    def test_lookup_unknown(self):
        assert CardCategory.lookup("Recipes") is None
        assert CardCategory.lookup("") is None
