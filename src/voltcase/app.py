"""Entry point for embedding the card library in an application."""

from .cards.store import CardStore
from .cards.transfer import CardExporter
from .config import LibraryConfig, config_from_env
from .library import CardLibrary
from .logging import configure_logger


def open_library(config: LibraryConfig | None = None) -> CardLibrary:
    """Build and load a CardLibrary.

    Args:
        config: Library configuration. Loaded from .env, the environment
            and the config file if None.

    Returns:
        A CardLibrary whose store has been loaded (or seeded).
    """
    if config is None:
        config = config_from_env()

    assert config.export_dir is not None
    activity = configure_logger(log_dir=config.log_dir, max_size_mb=config.log_max_size_mb)
    store = CardStore(config.cards_path, seed_samples=config.seed_samples)
    library = CardLibrary(store, CardExporter(config.export_dir), activity=activity)
    store.load()
    return library
