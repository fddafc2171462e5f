import logging
from typing import Any, Iterable, List, Optional

from collectionkit.core.contracts import StackContract
from collectionkit.core.equality import strict_index
from collectionkit.core.errors import UnderflowError

logger = logging.getLogger(__name__)


class Stack(StackContract):
    """Simple stack backed by a Python list; the top is the list's tail."""

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self._items: List[Any] = []
        if values is not None:
            for value in values:
                self.push(value)

    def push(self, element):
        self._items.append(element)

    def pop(self):
        if not self._items:
            raise UnderflowError("Stack is empty")
        return self._items.pop()

    def peek(self):
        if not self._items:
            raise UnderflowError("Stack is empty")
        return self._items[-1]

    def size(self) -> int:
        return len(self._items)

    def clear(self):
        logger.debug("Stack cleared (%d elements discarded)", len(self._items))
        self._items = []

    def contains(self, element) -> bool:
        return strict_index(self._items, element) is not None

    def to_array(self) -> List[Any]:
        return list(self._items)
