"""
Capability contracts shared by every container.

Callers that only need sizing, membership and snapshots should depend on
:class:`Collection`; the narrower contracts add sequential, FIFO, LIFO and
associative operations on top of it.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterator, List, Optional


class Collection(ABC):
    @abstractmethod
    def size(self) -> int:
        """Number of logically present elements."""

    def is_empty(self) -> bool:
        return self.size() == 0

    @abstractmethod
    def clear(self) -> None:
        """Remove every element. Never fails."""

    @abstractmethod
    def contains(self, element: Any) -> bool:
        """True iff some element is strictly equal to ``element``."""

    @abstractmethod
    def to_array(self) -> List[Any]:
        """Fresh list of the elements in logical order."""

    # ---------- Python protocol ----------

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __contains__(self, element: Any) -> bool:
        """
        Same as :meth:`contains`. Maps override this (and ``__iter__``) to
        work on keys like a ``dict``; polymorphic callers that need the
        value-based answer should call ``contains`` directly.
        """
        return self.contains(element)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_array())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_array()!r})"


class ListContract(Collection):
    """Index-addressable sequence with dense indices ``0..size-1``."""

    def add(self, element: Any) -> None:
        self.add_last(element)

    @abstractmethod
    def add_first(self, element: Any) -> None: ...

    @abstractmethod
    def add_last(self, element: Any) -> None: ...

    @abstractmethod
    def insert(self, index: int, element: Any) -> None:
        """Insert before ``index``; ``0 <= index <= size``."""

    @abstractmethod
    def get(self, index: int) -> Any: ...

    @abstractmethod
    def set(self, index: int, element: Any) -> None: ...

    @abstractmethod
    def remove(self, index: int) -> Any:
        """Remove and return the element at ``index``, closing the gap."""

    @abstractmethod
    def index_of(self, element: Any) -> Optional[int]:
        """Lowest matching index, or ``None`` when absent."""

    def extend(self, values) -> None:
        for value in values:
            self.add_last(value)


class QueueContract(Collection):
    """FIFO: elements leave in the order they arrived."""

    @abstractmethod
    def enqueue(self, element: Any) -> None: ...

    @abstractmethod
    def dequeue(self) -> Any: ...

    @abstractmethod
    def peek(self) -> Any: ...


class StackContract(Collection):
    """LIFO: the most recently pushed element leaves first."""

    @abstractmethod
    def push(self, element: Any) -> None: ...

    @abstractmethod
    def pop(self) -> Any: ...

    @abstractmethod
    def peek(self) -> Any: ...


class MapContract(Collection):
    """
    Key to value store with unique keys. ``contains`` tests values, matching
    ``contains_value``.
    """

    @abstractmethod
    def put(self, key: Any, value: Any) -> None: ...

    @abstractmethod
    def get(self, key: Any) -> Any: ...

    @abstractmethod
    def remove(self, key: Any) -> bool: ...

    @abstractmethod
    def contains_key(self, key: Any) -> bool: ...

    @abstractmethod
    def contains_value(self, value: Any) -> bool: ...

    @abstractmethod
    def keys(self) -> List[Any]: ...

    @abstractmethod
    def values(self) -> List[Any]: ...

    def contains(self, element: Any) -> bool:
        return self.contains_value(element)


class IteratorContract(ABC):
    @abstractmethod
    def has_next(self) -> bool: ...

    @abstractmethod
    def next(self) -> Any: ...

    @abstractmethod
    def current(self) -> Any: ...

    @abstractmethod
    def reset(self) -> None: ...
