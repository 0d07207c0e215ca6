"""Export and import of card collections.

Two export formats are written:
- JSON: the storage encoding, importable with read_json().
- Text: a human-readable report that cannot be imported back.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable, Sequence

from ..errors import CardDecodeError
from .codec import decode_cards, encode_cards
from .models import ReferenceCard

logger = logging.getLogger(__name__)

EXPORT_PREFIX = "voltcase_backup"
STAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
REPORT_TITLE = "VoltCase Reference Cards Export"
BLOCK_RULE = "═" * 39
CONTENT_RULE = "─" * 39
FAVORITE_MARK = "★"
NOT_FAVORITE_MARK = "☆"


def format_stamp(moment: datetime) -> str:
    """Format a timestamp as yyyy-MM-dd_HH-mm-ss in local time."""
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime(STAMP_FORMAT)


def render_text_report(cards: Sequence[ReferenceCard], generated: datetime) -> str:
    """Render the human-readable export report."""
    lines = [REPORT_TITLE, f"Generated: {format_stamp(generated)}", ""]
    for card in cards:
        lines.append(BLOCK_RULE)
        lines.append(f"TITLE: {card.title}")
        lines.append(f"CATEGORY: {card.category}")
        lines.append(
            f"FAVORITE: {FAVORITE_MARK if card.is_favorite else NOT_FAVORITE_MARK}"
        )
        if card.tags:
            lines.append(f"TAGS: {card.tags}")
        lines.append(f"CREATED: {format_stamp(card.created_at)}")
        lines.append(f"UPDATED: {format_stamp(card.updated_at)}")
        lines.append(CONTENT_RULE)
        lines.append(card.content)
        lines.append("")
    return "\n".join(lines) + "\n"


class CardExporter:
    """Writes export files and reads JSON exports back."""

    def __init__(
        self,
        export_dir: Path,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the exporter.

        Args:
            export_dir: Directory where export files are written.
            clock: Returns the generation time used in file names.
        """
        self.export_dir = export_dir
        self._clock = clock

    def export_json(self, cards: Sequence[ReferenceCard]) -> Path:
        """Write all cards to a timestamped JSON file.

        Returns:
            Path of the written file.

        Raises:
            OSError: If the file could not be written.
        """
        path = self._next_path("json")
        path.write_text(encode_cards(cards), encoding="utf-8")
        logger.info("Exported %d cards to %s", len(cards), path)
        return path

    def export_text(self, cards: Sequence[ReferenceCard]) -> Path:
        """Write the text report to a timestamped file.

        Raises:
            OSError: If the file could not be written.
        """
        generated = self._clock()
        path = self._next_path("txt", generated)
        path.write_text(render_text_report(cards, generated), encoding="utf-8")
        logger.info("Exported %d cards as text to %s", len(cards), path)
        return path

    def read_json(self, path: Path) -> list[ReferenceCard]:
        """Read cards from a JSON export.

        Raises:
            CardDecodeError: If the file cannot be read or decoded.
        """
        try:
            data = Path(path).read_bytes()
        except OSError as e:
            raise CardDecodeError(f"Cannot read {path}: {e}") from e
        return decode_cards(data)

    def _next_path(self, extension: str, generated: datetime | None = None) -> Path:
        """Build an unused file name for this generation time."""
        self.export_dir.mkdir(parents=True, exist_ok=True)
        stamp = format_stamp(generated or self._clock())
        path = self.export_dir / f"{EXPORT_PREFIX}_{stamp}.{extension}"
        counter = 1
        while path.exists():
            path = self.export_dir / f"{EXPORT_PREFIX}_{stamp}_{counter}.{extension}"
            counter += 1
        return path
