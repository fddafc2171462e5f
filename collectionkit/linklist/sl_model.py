import itertools
import logging
from typing import Any, Dict, Iterable, List, Optional

from collectionkit.core.contracts import ListContract
from collectionkit.core.equality import check_index, strict_equals

logger = logging.getLogger(__name__)


class Node:
    """One cell of the chain: its arena id, the element and the next id."""

    __slots__ = ("id", "value", "next")

    def __init__(self, node_id: int, value, next_id: Optional[int] = None):
        self.id = node_id
        self.value = value
        self.next = next_id

    def __repr__(self):
        return f"Node(id={self.id}, value={self.value!r}, next={self.next})"


class LinkedList(ListContract):
    """
    Singly linked list whose nodes sit in an id-keyed arena; ``next`` links
    are ids rather than object references. The list owns every node in the
    arena and ``count`` always equals the number reachable from ``head``.
    """

    def __init__(self, values: Optional[Iterable[Any]] = None):
        self._id_iter = itertools.count()
        self.head: Optional[int] = None
        self.nodes: Dict[int, Node] = {}
        self.count = 0
        if values is not None:
            self.create_from_iterable(values)

    def _new_node(self, value) -> Node:
        node = Node(next(self._id_iter), value)
        self.nodes[node.id] = node
        return node

    def size(self) -> int:
        return self.count

    def clear(self):
        logger.debug("LinkedList cleared (%d nodes released)", self.count)
        self.head = None
        self.nodes.clear()
        self.count = 0

    def create_from_iterable(self, values):
        self.clear()
        prev_id = None
        for value in values:
            node = self._new_node(value)
            if self.head is None:
                self.head = node.id
            if prev_id is not None:
                self.nodes[prev_id].next = node.id
            prev_id = node.id
            self.count += 1

    def to_array(self) -> List[Any]:
        ordered = []
        current = self.head
        while current is not None:
            node = self.nodes[current]
            ordered.append(node.value)
            current = node.next
        return ordered

    # ---------- Insertion ----------

    def add_first(self, element):
        node = self._new_node(element)
        node.next = self.head
        self.head = node.id
        self.count += 1

    def add_last(self, element):
        node = self._new_node(element)
        if self.head is None:
            self.head = node.id
        else:
            current = self.nodes[self.head]
            while current.next is not None:
                current = self.nodes[current.next]
            current.next = node.id
        self.count += 1

    def insert(self, index: int, element):
        check_index(index, self.count + 1)
        if index == 0:
            self.add_first(element)
            return

        prev = self._node_at(index - 1)
        node = self._new_node(element)
        node.next = prev.next
        prev.next = node.id
        self.count += 1

    # ---------- Access ----------

    def get(self, index: int):
        return self._node_at(index).value

    def set(self, index: int, element):
        self._node_at(index).value = element

    def remove(self, index: int):
        check_index(index, self.count)

        if index == 0:
            removed_id = self.head
            self.head = self.nodes[removed_id].next
        else:
            prev = self._node_at(index - 1)
            removed_id = prev.next
            prev.next = self.nodes[removed_id].next

        removed = self.nodes.pop(removed_id)
        self.count -= 1
        return removed.value

    def index_of(self, element) -> Optional[int]:
        current = self.head
        position = 0
        while current is not None:
            node = self.nodes[current]
            if strict_equals(node.value, element):
                return position
            current = node.next
            position += 1
        return None

    def contains(self, element) -> bool:
        return self.index_of(element) is not None

    # ---------- Internal helpers ----------

    def _node_at(self, index: int) -> Node:
        check_index(index, self.count)
        current = self.nodes[self.head]
        for _ in range(index):
            current = self.nodes[current.next]
        return current
