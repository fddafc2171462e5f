import logging
from typing import Any, Iterable, List, Optional

from collectionkit.core.contracts import QueueContract
from collectionkit.core.equality import strict_index
from collectionkit.core.errors import UnderflowError

logger = logging.getLogger(__name__)


class Queue(QueueContract):
    """
    FIFO queue backed by a Python list. The head is index 0, so every
    dequeue shifts the remaining elements down by one.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self._items: List[Any] = []
        if values is not None:
            for value in values:
                self.enqueue(value)

    def enqueue(self, element):
        self._items.append(element)

    def dequeue(self):
        if not self._items:
            raise UnderflowError("Queue is empty")
        return self._items.pop(0)

    def peek(self):
        if not self._items:
            raise UnderflowError("Queue is empty")
        return self._items[0]

    def size(self) -> int:
        return len(self._items)

    def clear(self):
        logger.debug("Queue cleared (%d elements discarded)", len(self._items))
        self._items = []

    def contains(self, element) -> bool:
        return strict_index(self._items, element) is not None

    def to_array(self) -> List[Any]:
        return list(self._items)
