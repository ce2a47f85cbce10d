"""Bounded and unbounded LIFO stacks with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Union

from structkit.queues import _attempt, _int_reader, _run_menu, _show

DEFAULT_CAPACITY = 5


class StackOverflowError(Exception):
    """Raised when pushing onto a stack that is full."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


class ArrayStack:
    """Stack with a fixed number of slots."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[int] = []

    def push(self, value: int) -> None:
        """Put value on top."""
        if len(self._items) == self.capacity:
            raise StackOverflowError("Stack overflow")
        self._items.append(value)

    def pop(self) -> int:
        """Remove and return the topmost value."""
        if not self._items:
            raise StackUnderflowError("Stack underflow")
        return self._items.pop()

    def peek(self) -> int:
        """Return the topmost value without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack is empty")
        return self._items[-1]

    def __iter__(self) -> Iterator[int]:
        """Iterate from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class _Node:
    value: int
    below: Optional["_Node"]


class LinkedStack:
    """Unbounded stack."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._top: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: int) -> None:
        """Put value on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        """Remove and return the topmost value."""
        if self._top is None:
            raise StackUnderflowError("Stack underflow")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> int:
        """Return the topmost value without removing it."""
        if self._top is None:
            raise StackUnderflowError("Stack is empty")
        return self._top.value

    def __iter__(self) -> Iterator[int]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size


_MESSAGES = {
    "array": {
        "popped": "\nTopmost element of the stack {} popped from the stack",
        "display": "\nElement of the stack (from top to bottom) are : ",
    },
    "linked": {
        "popped": "\nTopmost element {} popped from the stack",
        "display": "\nElements of the stack from top to bottom are : ",
    },
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run an interactive stack menu on standard input."""
    parser = argparse.ArgumentParser(description="Interactive stack menu.")
    parser.add_argument(
        "kind",
        nargs="?",
        choices=sorted(_MESSAGES),
        default="array",
        help="which stack to drive (default: array)",
    )
    args = parser.parse_args(argv)
    stack: Union[ArrayStack, LinkedStack] = (
        ArrayStack() if args.kind == "array" else LinkedStack()
    )
    messages = _MESSAGES[args.kind]
    read_int = _int_reader(sys.stdin)
    empty = "\nStack is empty"

    def push() -> None:
        value = read_int("\nEnter value to push : ")
        if value is None:
            return
        try:
            stack.push(value)
        except StackOverflowError:
            print("\nStack overflow")
        else:
            print(f"\n{value} pushed to the stack")

    options = [
        ("Push", push),
        ("Pop", lambda: _attempt(
            lambda: messages["popped"].format(stack.pop()),
            "\nStack underflow",
            StackUnderflowError,
        )),
        ("Peek", lambda: _attempt(
            lambda: f"\nTopmost element of the stack is {stack.peek()}",
            empty,
            StackUnderflowError,
        )),
        ("Display", lambda: _show(stack, messages["display"], empty)),
    ]
    return _run_menu(options, read_int)


if __name__ == "__main__":
    sys.exit(main())