"""VoltCase: local reference-card library."""

from .app import open_library
from .cards import CardCategory, ReferenceCard
from .config import LibraryConfig, load_config, save_config
from .library import CardLibrary
from .presentation import PresentationDeck
from .results import OperationResult, ResultStatus

__version__ = "0.1.0"

__all__ = [
    "CardCategory",
    "CardLibrary",
    "LibraryConfig",
    "OperationResult",
    "PresentationDeck",
    "ReferenceCard",
    "ResultStatus",
    "load_config",
    "open_library",
    "save_config",
]
