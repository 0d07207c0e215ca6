"""Library configuration loader.

Loads configuration from ~/.voltcase/config.json and the environment,
and provides the resolved paths the store, exporter and logger use.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = Path.home() / ".voltcase"
DEFAULT_CONFIG_PATH = DEFAULT_DATA_DIR / "config.json"
DEFAULT_CARDS_FILENAME = "voltcase_reference_cards.json"
DEFAULT_LOG_MAX_SIZE_MB = 10.0


@dataclass
class LibraryConfig:
    """Configuration for the card library.

    Attributes:
        data_dir: Directory holding the card file (~/.voltcase).
        cards_filename: Name of the card file inside data_dir.
        export_dir: Where exports are written. Defaults to data_dir.
        log_dir: Where the activity log is written. Defaults to data_dir/logs.
        log_max_size_mb: Size at which the activity log rotates.
        seed_samples: Seed sample cards when no card file exists.
    """

    data_dir: Path | None = None
    cards_filename: str = DEFAULT_CARDS_FILENAME
    export_dir: Path | None = None
    log_dir: Path | None = None
    log_max_size_mb: float = DEFAULT_LOG_MAX_SIZE_MB
    seed_samples: bool = True

    def __post_init__(self) -> None:
        """Validate config and set defaults."""
        if self.data_dir is None:
            self.data_dir = DEFAULT_DATA_DIR

        if self.export_dir is None:
            self.export_dir = self.data_dir

        if self.log_dir is None:
            self.log_dir = self.data_dir / "logs"

        if not self.cards_filename:
            raise ValueError("cards_filename must not be empty")

        if self.log_max_size_mb <= 0:
            raise ValueError("log_max_size_mb must be positive")

    @property
    def cards_path(self) -> Path:
        """Full path of the card file."""
        assert self.data_dir is not None
        return self.data_dir / self.cards_filename


def load_config(config_path: Path | None = None) -> LibraryConfig:
    """Load LibraryConfig from a JSON file.

    The config file should have this structure:
    ```json
    {
      "storage": {
        "data_dir": "~/.voltcase",
        "cards_filename": "voltcase_reference_cards.json",
        "export_dir": "~/Documents/voltcase",
        "seed_samples": true
      },
      "logging": {
        "dir": "~/.voltcase/logs",
        "max_size_mb": 10
      }
    }
    ```

    Args:
        config_path: Path to config file. Uses DEFAULT_CONFIG_PATH if None.

    Returns:
        LibraryConfig instance with loaded values.
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return LibraryConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.warning("Invalid JSON in %s: %s. Using defaults.", path, e)
        return LibraryConfig()
    except OSError as e:
        logger.warning("Cannot read %s: %s. Using defaults.", path, e)
        return LibraryConfig()

    if not isinstance(data, dict):
        logger.warning("Config in %s is not an object. Using defaults.", path)
        return LibraryConfig()

    return _parse_config(data)


def _parse_config(data: dict[str, Any]) -> LibraryConfig:
    """Parse config dictionary into LibraryConfig.

    Invalid values are ignored in favour of the defaults.
    """
    storage = data.get("storage", {})
    if not isinstance(storage, dict):
        storage = {}
    logging_data = data.get("logging", {})
    if not isinstance(logging_data, dict):
        logging_data = {}

    cards_filename = storage.get("cards_filename", DEFAULT_CARDS_FILENAME)
    if not isinstance(cards_filename, str) or not cards_filename:
        cards_filename = DEFAULT_CARDS_FILENAME

    seed_samples = storage.get("seed_samples", True)
    if not isinstance(seed_samples, bool):
        seed_samples = True

    max_size = logging_data.get("max_size_mb", DEFAULT_LOG_MAX_SIZE_MB)
    if isinstance(max_size, bool) or not isinstance(max_size, (int, float)) or max_size <= 0:
        max_size = DEFAULT_LOG_MAX_SIZE_MB

    return LibraryConfig(
        data_dir=_parse_dir(storage.get("data_dir")),
        cards_filename=cards_filename,
        export_dir=_parse_dir(storage.get("export_dir")),
        log_dir=_parse_dir(logging_data.get("dir")),
        log_max_size_mb=float(max_size),
        seed_samples=seed_samples,
    )


def _parse_dir(value: Any) -> Path | None:
    if not isinstance(value, str) or not value:
        return None
    return Path(value).expanduser()


def save_config(config: LibraryConfig, config_path: Path | None = None) -> None:
    """Save LibraryConfig to a JSON file, writing only non-default values.

    Args:
        config: The config to save.
        config_path: Path to write to. Uses DEFAULT_CONFIG_PATH if None.
    """
    path = config_path or DEFAULT_CONFIG_PATH

    # Ensure parent directory exists
    path.parent.mkdir(parents=True, exist_ok=True)

    assert config.data_dir is not None
    storage: dict[str, Any] = {}
    if config.data_dir != DEFAULT_DATA_DIR:
        storage["data_dir"] = str(config.data_dir)
    if config.cards_filename != DEFAULT_CARDS_FILENAME:
        storage["cards_filename"] = config.cards_filename
    if config.export_dir != config.data_dir:
        storage["export_dir"] = str(config.export_dir)
    if not config.seed_samples:
        storage["seed_samples"] = False

    logging_data: dict[str, Any] = {}
    if config.log_dir != config.data_dir / "logs":
        logging_data["dir"] = str(config.log_dir)
    if config.log_max_size_mb != DEFAULT_LOG_MAX_SIZE_MB:
        logging_data["max_size_mb"] = config.log_max_size_mb

    data: dict[str, Any] = {}
    if storage:
        data["storage"] = storage
    if logging_data:
        data["logging"] = logging_data

    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    except OSError as e:
        logger.error("Failed to save config to %s: %s", path, e)
        raise


def config_from_env() -> LibraryConfig:
    """Load configuration using .env and environment overrides.

    VOLTCASE_CONFIG points at the config file; VOLTCASE_DATA_DIR and
    VOLTCASE_EXPORT_DIR override the directories it names.
    """
    load_dotenv(find_dotenv(usecwd=True))

    config_path = os.getenv("VOLTCASE_CONFIG")
    config = load_config(Path(config_path).expanduser() if config_path else None)

    data_dir = os.getenv("VOLTCASE_DATA_DIR")
    export_dir = os.getenv("VOLTCASE_EXPORT_DIR")
    if not data_dir and not export_dir:
        return config

    new_data_dir = Path(data_dir).expanduser() if data_dir else config.data_dir
    assert config.data_dir is not None
    return LibraryConfig(
        data_dir=new_data_dir,
        cards_filename=config.cards_filename,
        export_dir=(
            Path(export_dir).expanduser()
            if export_dir
            # keep an explicit export_dir, otherwise follow the new data_dir
            else (config.export_dir if config.export_dir != config.data_dir else None)
        ),
        log_dir=config.log_dir if config.log_dir != config.data_dir / "logs" else None,
        log_max_size_mb=config.log_max_size_mb,
        seed_samples=config.seed_samples,
    )
