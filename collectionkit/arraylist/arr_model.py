import logging
from typing import Any, Iterable, List, Optional

from collectionkit.core.contracts import ListContract
from collectionkit.core.equality import check_index, strict_index
from collectionkit.core.settings import CollectionSettings, default_settings

logger = logging.getLogger(__name__)


class ArrayList(ListContract):
    """
    顺序表：elements live densely in ``_buf[0:_size]``; slots past ``_size``
    are ``None``. The buffer grows through the shared settings object when
    full, so appends are amortised O(1) while head inserts shift everything.
    """

    def __init__(
        self,
        values: Optional[Iterable[Any]] = None,
        settings: Optional[CollectionSettings] = None,
    ):
        self._settings = settings or default_settings
        self._buf: List[Any] = [None] * self._settings.initial_capacity
        self._size = 0
        if values is not None:
            self.create_from_iterable(values)

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def size(self) -> int:
        return self._size

    def clear(self):
        logger.debug("ArrayList cleared (%d elements discarded)", self._size)
        self._buf = [None] * self._settings.initial_capacity
        self._size = 0

    def create_from_iterable(self, values):
        self.clear()
        for value in values:
            self.add_last(value)

    # ---------- Insertion ----------

    def add_first(self, element):
        self.insert(0, element)

    def add_last(self, element):
        self._grow_if_full()
        self._buf[self._size] = element
        self._size += 1

    def insert(self, index: int, element):
        check_index(index, self._size + 1)
        self._grow_if_full()
        for i in range(self._size, index, -1):
            self._buf[i] = self._buf[i - 1]
        self._buf[index] = element
        self._size += 1

    # ---------- Access ----------

    def get(self, index: int):
        return self._buf[check_index(index, self._size)]

    def set(self, index: int, element):
        self._buf[check_index(index, self._size)] = element

    def remove(self, index: int):
        check_index(index, self._size)
        removed = self._buf[index]
        for i in range(index, self._size - 1):
            self._buf[i] = self._buf[i + 1]
        self._size -= 1
        self._buf[self._size] = None
        return removed

    def index_of(self, element) -> Optional[int]:
        return strict_index(self._live(), element)

    def contains(self, element) -> bool:
        return self.index_of(element) is not None

    def to_array(self) -> List[Any]:
        return list(self._live())

    # ---------- Internal helpers ----------

    def _live(self):
        return self._buf[: self._size]

    def _grow_if_full(self):
        if self._size < len(self._buf):
            return
        new_capacity = self._settings.grow(len(self._buf))
        logger.debug(
            "ArrayList buffer grown from %d to %d slots",
            len(self._buf),
            new_capacity,
        )
        self._buf.extend([None] * (new_capacity - len(self._buf)))

