import pytest

from exercisekit.queue_stack import EmptyError, Queue, QueueStack


def test_queue_stack_sequence():
    stack = QueueStack()
    with pytest.raises(EmptyError, match="Stack is empty"):
        stack.pop()
    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert stack.pop() == 3
    assert stack.pop() == 2
    stack.push(4)
    stack.push(5)
    assert stack.is_empty() is False
    assert stack.pop() == 5
    assert stack.pop() == 4
    assert stack.pop() == 1
    with pytest.raises(EmptyError, match="Stack is empty"):
        stack.pop()
    assert stack.is_empty() is True


def test_queue_is_fifo():
    queue = Queue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert len(queue) == 3
    assert queue.peek() == 1
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty() is True


def test_queue_empty_errors():
    queue = Queue()
    with pytest.raises(EmptyError, match="Queue is empty"):
        queue.dequeue()
    with pytest.raises(EmptyError, match="Queue is empty"):
        queue.peek()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        Queue().dequeue()