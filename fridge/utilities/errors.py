"""Exception types shared by the domain, persistence and reminder layers."""


class FridgeError(Exception):
    """Base class for every error raised by the fridge package."""


class ValidationError(FridgeError, ValueError):
    """A name was empty once leading/trailing whitespace was removed."""


class OutOfRangeError(FridgeError, IndexError):
    """A removal position does not exist in the grocery list."""

    def __init__(self, positions, size: int):
        self.positions = sorted(positions)
        self.size = size
        super().__init__(f"Positions {self.positions} out of range for list of size {size}")


class PersistenceError(FridgeError):
    """The key-value store could not be read or written."""


class NotificationSchedulingError(FridgeError):
    """A reminder could not be scheduled (e.g. notifications not authorized)."""


__all__ = [
    'FridgeError', 'ValidationError', 'OutOfRangeError',
    'PersistenceError', 'NotificationSchedulingError',
]
