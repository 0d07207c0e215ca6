"""JSONL activity log for library changes."""

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .cards.events import StoreEvent

logger = logging.getLogger(__name__)


@dataclass
class LogEntry:
    """A single log entry."""

    timestamp: str
    event: str
    card_ids: list[str] | None = None
    total: int | None = None
    path: str | None = None
    count: int | None = None
    success: bool | None = None
    error: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict, excluding None values."""
        data = asdict(self)
        return {k: v for k, v in data.items() if v is not None and v != {} and v != []}


class ActivityLogger:
    """Logger that writes library activity in JSONL format."""

    def __init__(
        self,
        log_dir: str | Path | None = None,
        filename: str = "activity.jsonl",
        max_size_mb: float = 10.0,
    ) -> None:
        if log_dir is None:
            log_dir = Path.home() / ".voltcase" / "logs"
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.filename = filename
        self.max_size_bytes = int(max_size_mb * 1024 * 1024)

    @property
    def log_path(self) -> Path:
        """Current log file path."""
        return self.log_dir / self.filename

    def _rotate_if_needed(self) -> None:
        """Rotate log file if it exceeds max size."""
        if not self.log_path.exists():
            return

        if self.log_path.stat().st_size >= self.max_size_bytes:
            timestamp = datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%S_%f")
            rotated_name = f"{self.log_path.stem}_{timestamp}.jsonl"
            self.log_path.rename(self.log_dir / rotated_name)

    def _write(self, entry: LogEntry) -> None:
        """Write a log entry to the file.

        A log that cannot be written is reported and skipped; the
        operation being logged has already happened.
        """
        try:
            self._rotate_if_needed()
            with open(self.log_path, "a", encoding="utf-8") as f:
                f.write(json.dumps(entry.to_dict(), ensure_ascii=False) + "\n")
        except OSError as e:
            logger.warning("Failed to write activity log %s: %s", self.log_path, e)

    def log(
        self,
        event: str,
        *,
        card_ids: list[str] | None = None,
        total: int | None = None,
        path: str | Path | None = None,
        count: int | None = None,
        success: bool | None = None,
        error: str | None = None,
        **extra: Any,
    ) -> None:
        """Log an event."""
        entry = LogEntry(
            timestamp=datetime.now(timezone.utc).isoformat(),
            event=event,
            card_ids=card_ids,
            total=total,
            path=str(path) if path is not None else None,
            count=count,
            success=success,
            error=error,
            extra=extra if extra else {},
        )
        self._write(entry)

    def log_store_event(self, event: StoreEvent) -> None:
        """Log a store change. Suitable as a CardStore listener."""
        self.log(
            f"cards_{event.action.value}",
            card_ids=list(event.card_ids),
            total=event.total,
            **event.extra,
        )

    def log_export(
        self,
        fmt: str,
        success: bool,
        *,
        path: Path | None = None,
        count: int | None = None,
        error: str | None = None,
    ) -> None:
        """Log an export attempt."""
        self.log(
            "export",
            path=path,
            count=count,
            success=success,
            error=error if not success else None,
            format=fmt,
        )

    def log_import(
        self,
        path: str | Path,
        success: bool,
        *,
        added: int | None = None,
        error: str | None = None,
    ) -> None:
        """Log an import attempt."""
        self.log(
            "import",
            path=path,
            count=added,
            success=success,
            error=error if not success else None,
        )


# Global logger instance
_logger: ActivityLogger | None = None


def get_logger() -> ActivityLogger:
    """Get the global activity logger instance."""
    global _logger
    if _logger is None:
        _logger = ActivityLogger()
    return _logger


def configure_logger(
    log_dir: str | Path | None = None, max_size_mb: float = 10.0
) -> ActivityLogger:
    """Configure and return the global activity logger."""
    global _logger
    _logger = ActivityLogger(log_dir=log_dir, max_size_mb=max_size_mb)
    return _logger
