"""Exceptions raised by the card store and transfer engine."""


class VoltCaseError(Exception):
    """Base class for library errors."""


class CardNotFoundError(VoltCaseError):
    """Raised when no card in the collection has the requested id."""

    def __init__(self, card_id: str) -> None:
        super().__init__(f"Card not found: {card_id}")
        self.card_id = card_id


class StorageWriteError(VoltCaseError):
    """Raised when the collection could not be written to disk.

    The in-memory mutation that triggered the write has already been
    applied when this is raised.
    """


class CardDecodeError(VoltCaseError):
    """Raised when a card payload cannot be read or decoded."""
