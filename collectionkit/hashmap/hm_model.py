import logging
from typing import Any, Dict, Hashable, Iterator, List, Mapping, Tuple

from collectionkit.core.contracts import MapContract
from collectionkit.core.equality import strict_index, strict_key
from collectionkit.core.errors import KeyNotFoundError

logger = logging.getLogger(__name__)

KeySlot = Hashable


class HashMap(MapContract):
    """
    Key to value store on top of a ``dict``.

    Entries are keyed by :func:`strict_key`, which tags every nested element
    with its type, so keys that compare equal but differ in type (``1``,
    ``1.0``, ``True``, or ``(1,)`` and ``(True,)``) remain separate entries.
    Each slot keeps the original key next to its value, which lets ``keys()`` and
    ``values()`` come back in the same pairing order.

    As with a plain ``dict``, ``in`` and iteration work on keys, while the
    collection-level ``contains`` and ``to_array`` work on values.
    """

    def __init__(self, entries=None):
        self._entries: Dict[KeySlot, Tuple[Any, Any]] = {}
        if entries is not None:
            pairs = entries.items() if isinstance(entries, Mapping) else entries
            for key, value in pairs:
                self.put(key, value)

    @staticmethod
    def _slot(key) -> KeySlot:
        return strict_key(key)

    def put(self, key, value):
        self._entries[self._slot(key)] = (key, value)

    def get(self, key):
        try:
            return self._entries[self._slot(key)][1]
        except KeyError:
            raise KeyNotFoundError("Key does not exist", items=repr(key)) from None

    def remove(self, key) -> bool:
        slot = self._slot(key)
        if slot in self._entries:
            del self._entries[slot]
            return True
        return False

    def contains_key(self, key) -> bool:
        return self._slot(key) in self._entries

    def contains_value(self, value) -> bool:
        return strict_index(self.values(), value) is not None

    def keys(self) -> List[Any]:
        return [key for key, _ in self._entries.values()]

    def values(self) -> List[Any]:
        return [value for _, value in self._entries.values()]

    def items(self) -> List[Tuple[Any, Any]]:
        return list(self._entries.values())

    def size(self) -> int:
        return len(self._entries)

    def clear(self):
        logger.debug("HashMap cleared (%d entries discarded)", len(self._entries))
        self._entries = {}

    def to_array(self) -> List[Any]:
        return self.values()

    # ---------- Mapping protocol ----------

    def __getitem__(self, key):
        return self.get(key)

    def __setitem__(self, key, value):
        self.put(key, value)

    def __delitem__(self, key):
        if not self.remove(key):
            raise KeyNotFoundError("Key does not exist", items=repr(key))

    def __contains__(self, key) -> bool:
        return self.contains_key(key)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.keys())

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"HashMap({{{body}}})"
