from typing import Any, Tuple

from collectionkit.core.contracts import Collection, IteratorContract
from collectionkit.core.errors import OutOfBoundsError


class CollectionIterator(IteratorContract):
    """
    Cursor over a frozen copy of a collection's elements.

    The copy is taken once, at construction; later changes to the source
    collection are never seen, not even after :meth:`reset`.
    """

    def __init__(self, collection: Collection):
        if not isinstance(collection, Collection):
            raise TypeError(
                f"expected a Collection, not {collection.__class__.__name__}"
            )
        self._elements: Tuple[Any, ...] = tuple(collection.to_array())
        self._position = 0

    @property
    def position(self) -> int:
        return self._position

    def has_next(self) -> bool:
        return self._position < len(self._elements)

    def next(self):
        if not self.has_next():
            raise OutOfBoundsError("No more elements")
        value = self._elements[self._position]
        self._position += 1
        return value

    def current(self):
        if self._position >= len(self._elements):
            raise OutOfBoundsError("No current element")
        return self._elements[self._position]

    def reset(self):
        self._position = 0

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self):
        return self

    def __next__(self):
        if not self.has_next():
            raise StopIteration
        return self.next()
