"""Bounded and unbounded FIFO queues, a double-ended queue, and an interactive menu."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from typing import Callable, Iterable, Iterator, Optional, Sequence, Union

DEFAULT_CAPACITY = 5


class QueueFullError(Exception):
    """Raised when a value is added to a queue that has no room left."""


class QueueEmptyError(IndexError):
    """Raised when a value is taken from or looked up in an empty queue."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class StaticQueue:
    """Array queue whose slots are only reclaimed once it has been emptied.

    Each enqueue uses up one of ``capacity`` slots; dequeuing does not free
    a slot until every queued value has been removed, at which point the
    queue starts over from the first slot.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[int] = []
        self._front = 0

    def enqueue(self, value: int) -> None:
        """Append value at the rear."""
        if len(self._slots) == self.capacity:
            raise QueueFullError("Queue is full")
        self._slots.append(value)

    def dequeue(self) -> int:
        """Remove and return the frontmost value."""
        value = self.peek()
        self._front += 1
        if self._front == len(self._slots):
            self._slots.clear()
            self._front = 0
        return value

    def peek(self) -> int:
        """Return the frontmost value without removing it."""
        if not self:
            raise QueueEmptyError("Queue is empty")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue:
    """Ring-buffer queue whose freed slots are reused at once."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._slots: list[Optional[int]] = [None] * self.capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: int) -> None:
        """Append value at the rear."""
        if self._size == self.capacity:
            raise QueueFullError("Queue is full")
        self._slots[(self._front + self._size) % self.capacity] = value
        self._size += 1

    def dequeue(self) -> int:
        """Remove and return the frontmost value."""
        value = self.peek()
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        if not self._size:
            self._front = 0
        return value

    def peek(self) -> int:
        """Return the frontmost value without removing it."""
        if not self._size:
            raise QueueEmptyError("Queue is empty")
        return self._slots[self._front]

    def __iter__(self) -> Iterator[int]:
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]

    def __len__(self) -> int:
        return self._size


class LinkedQueue:
    """Unbounded queue."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def enqueue(self, value: int) -> None:
        """Append value at the rear."""
        self._items.append(value)

    def dequeue(self) -> int:
        """Remove and return the frontmost value."""
        self.peek()
        return self._items.popleft()

    def peek(self) -> int:
        """Return the frontmost value without removing it."""
        if not self._items:
            raise QueueEmptyError("Queue is empty")
        return self._items[0]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


class Deque:
    """Double-ended queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self.capacity = _check_capacity(capacity)
        self._items: deque[int] = deque()

    def _ensure_room(self) -> None:
        if self.is_full():
            raise QueueFullError("Dequeue is full")

    def _ensure_items(self) -> None:
        if not self._items:
            raise QueueEmptyError("Dequeue is empty")

    def push_front(self, value: int) -> None:
        self._ensure_room()
        self._items.appendleft(value)

    def push_back(self, value: int) -> None:
        self._ensure_room()
        self._items.append(value)

    def pop_front(self) -> int:
        self._ensure_items()
        return self._items.popleft()

    def pop_back(self) -> int:
        self._ensure_items()
        return self._items.pop()

    def peek_front(self) -> int:
        self._ensure_items()
        return self._items[0]

    def peek_back(self) -> int:
        self._ensure_items()
        return self._items[-1]

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def is_full(self) -> bool:
        return len(self._items) == self.capacity


ReadInt = Callable[[str], Optional[int]]
MenuOptions = Sequence[tuple[str, Callable[[], None]]]
_AnyQueue = Union[StaticQueue, CircularQueue, LinkedQueue]


def _int_reader(stream: Iterable[str]) -> ReadInt:
    """Return a prompt-and-read function over whitespace-separated tokens.

    It raises EOFError once input runs out and yields None for a token
    that is not an integer.
    """
    tokens = (token for line in stream for token in line.split())

    def read_int(prompt: str) -> Optional[int]:
        print(prompt, end="", flush=True)
        token = next(tokens, None)
        if token is None:
            raise EOFError
        try:
            return int(token)
        except ValueError:
            return None

    return read_int


def _run_menu(options: MenuOptions, read_int: ReadInt) -> int:
    """Show the numbered options plus Exit until Exit is chosen or input ends."""
    labels = [label for label, _ in options] + ["Exit"]
    try:
        while True:
            print("\n\nMAIN MENU\n")
            for number, label in enumerate(labels, 1):
                print(f"{number}. {label}")
            choice = read_int("\nEnter your choice : ")
            if choice == len(labels):
                print("\nProgram exited successfully")
                return 0
            if choice is not None and 1 <= choice < len(labels):
                options[choice - 1][1]()
            else:
                print("\nPlease enter a valid option")
    except EOFError:
        return 0


def _attempt(
    render: Callable[[], str],
    empty_message: str,
    error: type[Exception] = QueueEmptyError,
) -> None:
    try:
        print(render())
    except error:
        print(empty_message)


def _show(values: Iterable[int], heading: str, empty_message: str) -> None:
    items = list(values)
    print(heading + " ".join(map(str, items)) if items else empty_message)


def _queue_options(queue: _AnyQueue, read_int: ReadInt) -> MenuOptions:
    empty = "\nQueue is empty"

    def enqueue() -> None:
        value = read_int("\nEnter value to enqueue : ")
        if value is None:
            return
        try:
            queue.enqueue(value)
        except QueueFullError:
            print("\nQueue is full")
        else:
            print(f"\n{value} enqueued successfully")

    return [
        ("Enqueue", enqueue),
        ("Dequeue", lambda: _attempt(
            lambda: f"\n{queue.dequeue()} dequeued successfully", empty)),
        ("Peek", lambda: _attempt(
            lambda: f"\nFrontmost element of the queue is {queue.peek()}", empty)),
        ("Display", lambda: _show(queue, "\nQueue elements are : ", empty)),
    ]


def _deque_options(dq: Deque, read_int: ReadInt) -> MenuOptions:
    empty = "\nDequeue is empty"

    def pusher(where: str, push: Callable[[int], None]) -> Callable[[], None]:
        def run() -> None:
            if dq.is_full():
                print("\nDequeue is full")
                return
            value = read_int(f"\nEnter value to insert at {where} : ")
            if value is not None:
                push(value)

        return run

    def reporter(template: str, take: Callable[[], int]) -> Callable[[], None]:
        return lambda: _attempt(lambda: template.format(take()), empty)

    def shower(order: str, values: Callable[[], Iterable[int]]) -> Callable[[], None]:
        heading = f"\nElements of dequeue from {order} are : "
        return lambda: _show(values(), heading, empty)

    return [
        ("Enqueue at front", pusher("front", dq.push_front)),
        ("Enqueue at rear", pusher("rear", dq.push_back)),
        ("Dequeue from front", reporter("\nDeleted front element {}", dq.pop_front)),
        ("Dequeue from rear", reporter("\nDeleted rear element {}", dq.pop_back)),
        ("Front element", reporter("\nFront element of the dequeue is {}", dq.peek_front)),
        ("Rear element", reporter("\nRear element of the dequeue is {}", dq.peek_back)),
        ("Display elements from front to rear", shower("front to rear", lambda: dq)),
        ("Display elements from rear to front", shower("rear to front", lambda: reversed(dq))),
    ]


_KINDS = {
    "static": StaticQueue,
    "circular": CircularQueue,
    "linked": LinkedQueue,
    "deque": Deque,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run an interactive queue menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive queue menu.")
    parser.add_argument(
        "kind",
        nargs="?",
        choices=sorted(_KINDS),
        default="circular",
        help="which queue to drive (default: circular)",
    )
    args = parser.parse_args(argv)
    read_int = _int_reader(sys.stdin)
    container = _KINDS[args.kind]()
    if isinstance(container, Deque):
        options = _deque_options(container, read_int)
    else:
        options = _queue_options(container, read_int)
    return _run_menu(options, read_int)


if __name__ == "__main__":
    sys.exit(main())