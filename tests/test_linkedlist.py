from collectionkit import LinkedList, Node


def _reachable(values: LinkedList):
    seen = []
    current = values.head
    while current is not None:
        seen.append(current)
        current = values.nodes[current].next
    return seen


class TestNodeChain:
    def test_node_fields(self):
        node = Node(7, "v")
        assert node.id == 7
        assert node.value == "v"
        assert node.next is None

    def test_add_first_becomes_head(self):
        values = LinkedList(["b"])
        old_head = values.head
        values.add_first("a")
        assert values.nodes[values.head].value == "a"
        assert values.nodes[values.head].next == old_head

    def test_count_matches_reachable_nodes(self):
        values = LinkedList()
        values.add("a")
        values.add_first("b")
        values.add_last("c")
        values.insert(1, "d")
        values.remove(0)
        values.remove(2)
        assert values.count == len(_reachable(values)) == len(values.nodes)
        assert values.to_array() == ["d", "a"]

    def test_removed_node_released(self):
        values = LinkedList([1, 2, 3])
        middle = _reachable(values)[1]
        values.remove(1)
        assert middle not in values.nodes
        assert values.nodes[values.head].next == _reachable(values)[1]

    def test_remove_only_node_clears_head(self):
        values = LinkedList(["solo"])
        values.remove(0)
        assert values.head is None
        assert values.nodes == {}
        assert values.count == 0

    def test_clear_releases_nodes(self):
        values = LinkedList([1, 2, 3])
        values.clear()
        assert values.head is None
        assert values.nodes == {}
        assert values.count == 0
