import pytest

from collectionkit import Queue, QueueContract, Stack, StackContract, UnderflowError


class TestStack:
    def test_lifo(self):
        stack = Stack()
        for page in ["Page 1", "Page 2", "Page 3"]:
            stack.push(page)
        assert stack.peek() == "Page 3"
        assert stack.pop() == "Page 3"
        assert stack.peek() == "Page 2"
        assert stack.pop() == "Page 2"
        assert stack.pop() == "Page 1"
        assert stack.is_empty()

    def test_push_grows_by_one(self):
        stack = Stack()
        stack.push("a")
        assert stack.size() == 1
        assert stack.contains("a")
        assert isinstance(stack, StackContract)

    def test_peek_does_not_remove(self):
        stack = Stack([1, 2])
        stack.peek()
        assert stack.size() == 2

    def test_underflow(self):
        stack = Stack()
        with pytest.raises(UnderflowError, match="Stack is empty"):
            stack.pop()
        with pytest.raises(UnderflowError):
            stack.peek()
        assert stack.size() == 0

    def test_to_array_bottom_to_top(self):
        stack = Stack(["a", "b"])
        snapshot = stack.to_array()
        assert snapshot == ["a", "b"]
        snapshot.pop()
        assert stack.size() == 2

    def test_clear(self):
        stack = Stack([1, 2, 3])
        stack.clear()
        assert stack.size() == 0
        assert stack.is_empty()

    def test_strict_contains(self):
        stack = Stack([1])
        assert not stack.contains(True)
        assert not stack.contains("1")


class TestQueue:
    def test_fifo(self):
        queue = Queue()
        for customer in ["Customer 1", "Customer 2", "Customer 3"]:
            queue.enqueue(customer)
        assert queue.peek() == "Customer 1"
        assert queue.dequeue() == "Customer 1"
        assert queue.peek() == "Customer 2"
        assert queue.dequeue() == "Customer 2"
        assert queue.dequeue() == "Customer 3"
        assert queue.is_empty()

    def test_enqueue_grows_by_one(self):
        queue = Queue()
        queue.enqueue(0)
        assert queue.size() == 1
        assert queue.contains(0)
        assert isinstance(queue, QueueContract)

    def test_underflow(self):
        queue = Queue()
        with pytest.raises(UnderflowError, match="Queue is empty"):
            queue.dequeue()
        with pytest.raises(UnderflowError):
            queue.peek()
        assert queue.size() == 0

    def test_to_array_head_first(self):
        queue = Queue([1, 2, 3])
        queue.dequeue()
        assert queue.to_array() == [2, 3]

    def test_clear(self):
        queue = Queue([1, 2])
        queue.clear()
        assert queue.is_empty()
        with pytest.raises(UnderflowError):
            queue.dequeue()
