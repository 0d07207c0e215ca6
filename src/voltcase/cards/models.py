"""Data models for reference cards."""

import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class CardCategory(Enum):
    """Closed catalog of card categories.

    The value is the display label, which is what cards persist.
    """

    ERROR_CODES = "Error Codes"
    SETUP_INSTRUCTIONS = "Setup Instructions"
    COMMAND_LINE = "Command Line"
    BUILD_FLAGS = "Build Flags"
    NAMING_RULES = "Naming Rules"
    API_HEADERS = "API Headers"
    CONFIGURATIONS = "Configurations"
    TROUBLESHOOTING = "Troubleshooting"
    DOCUMENTATION = "Documentation"
    QUICK_REFERENCE = "Quick Reference"

    @property
    def label(self) -> str:
        return self.value

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def color(self) -> str:
        return _COLORS[self]

    @classmethod
    def lookup(cls, text: str) -> "CardCategory | None":
        """Resolve a display label or member key to a category.

        Args:
            text: A label such as "Command Line" or a key such as "command_line".

        Returns:
            The matching category, or None if the catalog has no such entry.
        """
        for category in cls:
            if category.value == text:
                return category
        try:
            return cls[text.strip().upper()]
        except KeyError:
            return None

    @classmethod
    def labels(cls) -> list[str]:
        return [category.value for category in cls]


_ICONS = {
    CardCategory.ERROR_CODES: "exclamationmark.triangle",
    CardCategory.SETUP_INSTRUCTIONS: "gear",
    CardCategory.COMMAND_LINE: "terminal",
    CardCategory.BUILD_FLAGS: "flag",
    CardCategory.NAMING_RULES: "textformat",
    CardCategory.API_HEADERS: "network",
    CardCategory.CONFIGURATIONS: "slider.horizontal.3",
    CardCategory.TROUBLESHOOTING: "wrench",
    CardCategory.DOCUMENTATION: "doc.text",
    CardCategory.QUICK_REFERENCE: "bolt",
}

_COLORS = {
    CardCategory.ERROR_CODES: "#ff2c1f",
    CardCategory.SETUP_INSTRUCTIONS: "#1e90ff",
    CardCategory.COMMAND_LINE: "#ffc700",
    CardCategory.BUILD_FLAGS: "#ff2c1f",
    CardCategory.NAMING_RULES: "#1e90ff",
    CardCategory.API_HEADERS: "#ffc700",
    CardCategory.CONFIGURATIONS: "#ff2c1f",
    CardCategory.TROUBLESHOOTING: "#1e90ff",
    CardCategory.DOCUMENTATION: "#ffc700",
    CardCategory.QUICK_REFERENCE: "#ff2c1f",
}


@dataclass(frozen=True)
class ReferenceCard:
    """A short reference card.

    Cards are immutable; mutations return a new card carrying the same
    id and created_at.

    Attributes:
        title: Card title.
        content: Card body text.
        category: Display label of the category. May name a label that is
            no longer in the catalog.
        is_favorite: Whether the card is starred.
        tags: Comma-delimited tags, None when the card has none.
        id: UUID string, assigned once at construction.
        created_at: UTC timestamp when created.
        updated_at: UTC timestamp of the last content or favorite change.
    """

    title: str
    content: str
    category: str
    is_favorite: bool = False
    tags: str | None = None
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    @property
    def tag_list(self) -> list[str]:
        """Tags split on commas, trimmed, blanks dropped."""
        if not self.tags:
            return []
        return [tag.strip() for tag in self.tags.split(",") if tag.strip()]

    @property
    def category_info(self) -> CardCategory | None:
        return CardCategory.lookup(self.category)

    def toggled_favorite(self) -> "ReferenceCard":
        """Return a copy with the favorite flag flipped."""
        return replace(
            self,
            is_favorite=not self.is_favorite,
            updated_at=self._next_timestamp(),
        )

    def with_content(
        self,
        title: str,
        content: str,
        category: str,
        tags: str | None,
    ) -> "ReferenceCard":
        """Return a copy with new title, content, category and tags."""
        return replace(
            self,
            title=title,
            content=content,
            category=category,
            tags=tags,
            updated_at=self._next_timestamp(),
        )

    def _next_timestamp(self) -> datetime:
        # updated_at never moves backwards, even if the clock does
        return max(utc_now(), self.updated_at)
