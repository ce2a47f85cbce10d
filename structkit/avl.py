"""Self-balancing AVL binary search tree of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: int
    height: int = 1
    left: Optional["_Node"] = None
    right: Optional["_Node"] = None


def _height(node: Optional[_Node]) -> int:
    return node.height if node else 0


def _balance(node: Optional[_Node]) -> int:
    return _height(node.left) - _height(node.right) if node else 0


def _refresh(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_right(y: _Node) -> _Node:
    x = y.left
    y.left = x.right
    x.right = y
    _refresh(y)
    _refresh(x)
    return x


def _rotate_left(x: _Node) -> _Node:
    y = x.right
    x.right = y.left
    y.left = x
    _refresh(x)
    _refresh(y)
    return y


def _insert(node: Optional[_Node], value: int) -> tuple[_Node, bool]:
    if node is None:
        return _Node(value), True
    if value < node.value:
        node.left, inserted = _insert(node.left, value)
    elif value > node.value:
        node.right, inserted = _insert(node.right, value)
    else:
        return node, False

    _refresh(node)
    balance = _balance(node)
    if balance > 1 and value < node.left.value:
        return _rotate_right(node), inserted
    if balance < -1 and value > node.right.value:
        return _rotate_left(node), inserted
    if balance > 1 and value > node.left.value:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), inserted
    if balance < -1 and value < node.right.value:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), inserted
    return node, inserted


def _leftmost(node: _Node) -> _Node:
    while node.left:
        node = node.left
    return node


def _delete(node: Optional[_Node], value: int) -> tuple[Optional[_Node], bool]:
    if node is None:
        return None, False
    if value < node.value:
        node.left, deleted = _delete(node.left, value)
    elif value > node.value:
        node.right, deleted = _delete(node.right, value)
    else:
        deleted = True
        if node.left is None or node.right is None:
            child = node.left or node.right
            if child is None:
                return None, True
            node = child
        else:
            successor = _leftmost(node.right)
            node.value = successor.value
            node.right, _ = _delete(node.right, successor.value)

    _refresh(node)
    balance = _balance(node)
    if balance > 1 and _balance(node.left) >= 0:
        return _rotate_right(node), deleted
    if balance > 1 and _balance(node.left) < 0:
        node.left = _rotate_left(node.left)
        return _rotate_right(node), deleted
    if balance < -1 and _balance(node.right) <= 0:
        return _rotate_left(node), deleted
    if balance < -1 and _balance(node.right) > 0:
        node.right = _rotate_right(node.right)
        return _rotate_left(node), deleted
    return node, deleted


def _walk_pre(node: Optional[_Node]) -> Iterator[int]:
    if node:
        yield node.value
        yield from _walk_pre(node.left)
        yield from _walk_pre(node.right)


def _walk_in(node: Optional[_Node]) -> Iterator[int]:
    if node:
        yield from _walk_in(node.left)
        yield node.value
        yield from _walk_in(node.right)


def _walk_post(node: Optional[_Node]) -> Iterator[int]:
    if node:
        yield from _walk_post(node.left)
        yield from _walk_post(node.right)
        yield node.value


class AVLTree:
    """A set of integers kept in a height-balanced binary search tree."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: int) -> bool:
        """Add value; return False if it was already present."""
        self._root, inserted = _insert(self._root, value)
        if inserted:
            self._size += 1
        return inserted

    def delete(self, value: int) -> bool:
        """Remove value; return False if it was not present."""
        self._root, deleted = _delete(self._root, value)
        if deleted:
            self._size -= 1
        return deleted

    def preorder(self) -> list[int]:
        return list(_walk_pre(self._root))

    def inorder(self) -> list[int]:
        return list(_walk_in(self._root))

    def postorder(self) -> list[int]:
        return list(_walk_post(self._root))

    def __contains__(self, value: object) -> bool:
        node = self._root
        while node:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return _walk_in(self._root)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _show(tree: AVLTree, title: str, values: list[int]) -> None:
    if not tree:
        print("\nTree is empty")
    else:
        print(f"\n{title} traversal is : " + " ".join(map(str, values)))


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive AVL tree menu on standard input."""
    argparse.ArgumentParser(description="Interactive AVL tree menu.").parse_args(argv)
    tree = AVLTree()
    tokens = _tokens(sys.stdin)

    def read_int(prompt: str) -> Optional[int]:
        _prompt(prompt)
        token = next(tokens, None)
        if token is None:
            raise EOFError
        try:
            return int(token)
        except ValueError:
            print("\nInvalid value entered")
            return None

    while True:
        print("\n\nMAIN MENU\n")
        print("1. Insert node")
        print("2. Delete node")
        print("3. Pre order traversal")
        print("4. In order traversal")
        print("5. Post order traversal")
        print("6. Exit")
        try:
            choice = read_int("\nEnter your choice : ")
            if choice == 1:
                value = read_int("\nEnter value to insert : ")
                if value is not None:
                    if tree.insert(value):
                        print(f"\n{value} inserted into the tree")
                    else:
                        print(f"\n{value} already exists in the tree")
            elif choice == 2:
                value = read_int("\nEnter value to delete : ")
                if value is not None:
                    if tree.delete(value):
                        print(f"\n{value} deleted successfully")
                    elif not tree:
                        print("\nTree is empty")
                    else:
                        print(f"\n{value} not found in the tree")
            elif choice == 3:
                _show(tree, "Pre order", tree.preorder())
            elif choice == 4:
                _show(tree, "In order", tree.inorder())
            elif choice == 5:
                _show(tree, "Post order", tree.postorder())
            elif choice == 6:
                print("\nExiting the program")
                return 0
            elif choice is not None:
                print("\nInvalid option entered")
        except EOFError:
            return 0


if __name__ == "__main__":
    sys.exit(main())