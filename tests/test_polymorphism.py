"""Callers written against the Collection contract alone."""

import pytest

from collectionkit import (
    ArrayList,
    Collection,
    HashMap,
    LinkedList,
    Queue,
    Stack,
)


def describe(collection: Collection) -> str:
    return "{} size={} empty={} [{}]".format(
        collection.__class__.__name__,
        collection.size(),
        "yes" if collection.is_empty() else "no",
        ", ".join(str(item) for item in collection.to_array()),
    )


def _filled(cls, values):
    collection = cls()
    for value in values:
        if isinstance(collection, Stack):
            collection.push(value)
        elif isinstance(collection, Queue):
            collection.enqueue(value)
        elif isinstance(collection, HashMap):
            collection.put(f"k{value}", value)
        else:
            collection.add(value)
    return collection


@pytest.mark.parametrize("cls", [ArrayList, LinkedList, Stack, Queue, HashMap])
class TestCollectionContract:
    def test_insert_then_contains(self, cls):
        collection = _filled(cls, ["a", "b"])
        before = collection.size()
        if isinstance(collection, Stack):
            collection.push("e")
        elif isinstance(collection, Queue):
            collection.enqueue("e")
        elif isinstance(collection, HashMap):
            collection.put("ke", "e")
        else:
            collection.add("e")
        assert collection.size() == before + 1
        assert collection.contains("e")

    def test_clear(self, cls):
        collection = _filled(cls, [1, 2, 3])
        assert not collection.is_empty()
        collection.clear()
        assert collection.size() == 0
        assert collection.is_empty()
        assert len(collection) == 0

    def test_to_array_is_detached(self, cls):
        collection = _filled(cls, [1, 2])
        collection.to_array().clear()
        assert collection.size() == 2


def test_describe_sequences():
    assert describe(_filled(ArrayList, ["Java", "PHP", "Python"])) == (
        "ArrayList size=3 empty=no [Java, PHP, Python]"
    )
    assert describe(_filled(Stack, ["Page 1", "Page 2"])) == (
        "Stack size=2 empty=no [Page 1, Page 2]"
    )
    assert describe(Queue()) == "Queue size=0 empty=yes []"


def test_contracts_are_abstract():
    with pytest.raises(TypeError):
        Collection()
