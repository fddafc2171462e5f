from typing import Any


class CollectionError(Exception):
    """Base class for all container errors."""

    def __init__(self, message, *, items: Any = None):
        if items is not None:
            items = str(items)
            if len(items) > 50:
                items = f"{items[:50]}..."
            message = f"{message} (items: {items})"

        super().__init__(message)
        self.message = message
        self.items = items

    def __str__(self):
        return self.message


class OutOfBoundsError(CollectionError, IndexError):
    """Raised when an index, key or cursor lies outside the valid range."""

    pass


class KeyNotFoundError(OutOfBoundsError, KeyError):
    """Raised when a map lookup names a key that is not present."""

    pass


class UnderflowError(CollectionError, IndexError):
    """Raised when removing from or peeking into an empty stack or queue."""

    pass
