import io

import pytest

from structkit.queues import (
    CircularQueue,
    Deque,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
    StaticQueue,
    main,
)


def test_static_queue_fifo_order():
    q = StaticQueue()
    for v in (4, 8, 15):
        q.enqueue(v)
    assert list(q) == [4, 8, 15]
    assert len(q) == 3
    assert q.peek() == 4
    assert [q.dequeue() for _ in range(3)] == [4, 8, 15]
    assert len(q) == 0


def test_circular_queue_fifo_order():
    q = CircularQueue()
    for v in (4, 8, 15):
        q.enqueue(v)
    assert list(q) == [4, 8, 15]
    assert len(q) == 3
    assert q.peek() == 4
    assert [q.dequeue() for _ in range(3)] == [4, 8, 15]
    assert len(q) == 0


def test_linked_queue_fifo_order():
    q = LinkedQueue()
    for v in (4, 8, 15):
        q.enqueue(v)
    assert list(q) == [4, 8, 15]
    assert len(q) == 3
    assert q.peek() == 4
    assert [q.dequeue() for _ in range(3)] == [4, 8, 15]
    assert len(q) == 0


@pytest.mark.parametrize("operation", ["dequeue", "peek"])
def test_static_queue_empty_errors(operation):
    q = StaticQueue()
    assert len(q) == 0
    with pytest.raises(QueueEmptyError):
        getattr(q, operation)()


@pytest.mark.parametrize("operation", ["dequeue", "peek"])
def test_circular_queue_empty_errors(operation):
    q = CircularQueue()
    assert len(q) == 0
    with pytest.raises(QueueEmptyError):
        getattr(q, operation)()


@pytest.mark.parametrize("operation", ["dequeue", "peek"])
def test_linked_queue_empty_errors(operation):
    q = LinkedQueue()
    assert len(q) == 0
    with pytest.raises(QueueEmptyError):
        getattr(q, operation)()


def test_static_queue_default_capacity_is_five():
    q = StaticQueue()
    for v in range(5):
        q.enqueue(v)
    with pytest.raises(QueueFullError):
        q.enqueue(99)
    assert list(q) == list(range(5))


def test_circular_queue_default_capacity_is_five():
    q = CircularQueue()
    for v in range(5):
        q.enqueue(v)
    with pytest.raises(QueueFullError):
        q.enqueue(99)
    assert list(q) == list(range(5))


def test_static_queue_does_not_reuse_slots_until_empty():
    q = StaticQueue(capacity=3)
    for v in (1, 2, 3):
        q.enqueue(v)
    assert q.dequeue() == 1
    with pytest.raises(QueueFullError):
        q.enqueue(4)
    assert [q.dequeue(), q.dequeue()] == [2, 3]
    q.enqueue(4)
    assert list(q) == [4]


def test_circular_queue_reuses_freed_slots():
    q = CircularQueue(capacity=3)
    for v in (1, 2, 3):
        q.enqueue(v)
    assert q.dequeue() == 1
    q.enqueue(4)
    assert list(q) == [2, 3, 4]


def test_linked_queue_is_unbounded():
    q = LinkedQueue(range(100))
    q.enqueue(100)
    assert len(q) == 101
    assert list(q) == list(range(101))


def test_static_queue_invalid_capacity():
    with pytest.raises(ValueError):
        StaticQueue(capacity=0)


def test_circular_queue_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(capacity=0)


def test_deque_invalid_capacity():
    with pytest.raises(ValueError):
        Deque(capacity=0)


def test_deque_both_ends():
    dq = Deque()
    dq.push_back(2)
    dq.push_front(1)
    dq.push_back(3)
    assert list(dq) == [1, 2, 3]
    assert list(reversed(dq)) == [3, 2, 1]
    assert (dq.peek_front(), dq.peek_back()) == (1, 3)
    assert (dq.pop_front(), dq.pop_back()) == (1, 3)
    assert list(dq) == [2]


@pytest.mark.parametrize("operation", ["push_front", "push_back"])
def test_deque_full(operation):
    dq = Deque(capacity=2)
    dq.push_front(1)
    dq.push_back(2)
    with pytest.raises(QueueFullError):
        getattr(dq, operation)(3)
    assert list(dq) == [1, 2]


@pytest.mark.parametrize("operation", ["pop_front", "pop_back", "peek_front", "peek_back"])
def test_deque_empty(operation):
    dq = Deque(capacity=2)
    dq.push_front(1)
    assert dq.pop_back() == 1
    assert len(dq) == 0
    with pytest.raises(QueueEmptyError):
        getattr(dq, operation)()


@pytest.mark.parametrize(
    ("kind", "feed", "expected", "absent"),
    [
        (
            "linked",
            "1\n7\n1\n9\n4\n2\n3\n5\n",
            [
                "7 enqueued successfully",
                "Queue elements are : 7 9",
                "7 dequeued successfully",
                "Frontmost element of the queue is 9",
                "Program exited successfully",
            ],
            [],
        ),
        (
            "static",
            "".join(f"1\n{v}\n" for v in range(6)) + "5\n",
            ["Queue is full", "4 enqueued successfully"],
            ["5 enqueued successfully"],
        ),
        (
            "circular",
            "2\n42\n",
            ["Queue is empty", "Please enter a valid option"],
            ["Program exited successfully"],
        ),
        (
            "deque",
            "1\n5\n2\n6\n7\n8\n3\n4\n4\n9\n",
            [
                "Elements of dequeue from front to rear are : 5 6",
                "Elements of dequeue from rear to front are : 6 5",
                "Deleted front element 5",
                "Deleted rear element 6",
                "Dequeue is empty",
            ],
            [],
        ),
    ],
)
def test_main(monkeypatch, capsys, kind, feed, expected, absent):
    monkeypatch.setattr("sys.stdin", io.StringIO(feed))
    assert main([kind]) == 0
    out = capsys.readouterr().out
    assert [text for text in expected if text not in out] == []
    assert [text for text in absent if text in out] == []