"""B-tree of integers with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from bisect import bisect_left, bisect_right
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class _BNode:
    leaf: bool
    keys: list[int] = field(default_factory=list)
    children: list["_BNode"] = field(default_factory=list)

    def walk(self) -> Iterator[int]:
        if self.leaf:
            yield from self.keys
            return
        for child, key in zip(self.children, self.keys):
            yield from child.walk()
            yield key
        yield from self.children[-1].walk()


class BTree:
    """A set of integers kept in a B-tree of minimum degree ``t``."""

    def __init__(self, t: int = 3, keys: Iterable[int] = ()) -> None:
        if t < 2:
            raise ValueError("minimum degree must be at least 2")
        self.t = t
        self._root: Optional[_BNode] = None
        for key in keys:
            self.insert(key)

    @property
    def _max_keys(self) -> int:
        return 2 * self.t - 1

    # ------------------------------------------------------------ insertion

    def insert(self, key: int) -> bool:
        """Add key; return False if it was already present."""
        if self._root is None:
            self._root = _BNode(leaf=True, keys=[key])
            return True
        if self.search(key):
            return False

        root = self._root
        if len(root.keys) == self._max_keys:
            new_root = _BNode(leaf=False, children=[root])
            self._split_child(new_root, 0)
            i = 1 if new_root.keys[0] < key else 0
            self._insert_non_full(new_root.children[i], key)
            self._root = new_root
        else:
            self._insert_non_full(root, key)
        return True

    def _split_child(self, parent: _BNode, i: int) -> None:
        t = self.t
        full = parent.children[i]
        sibling = _BNode(leaf=full.leaf, keys=full.keys[t:])
        if not full.leaf:
            sibling.children = full.children[t:]
            full.children = full.children[:t]
        median = full.keys[t - 1]
        full.keys = full.keys[: t - 1]
        parent.children.insert(i + 1, sibling)
        parent.keys.insert(i, median)

    def _insert_non_full(self, node: _BNode, key: int) -> None:
        while not node.leaf:
            i = bisect_right(node.keys, key)
            if len(node.children[i].keys) == self._max_keys:
                self._split_child(node, i)
                if node.keys[i] < key:
                    i += 1
            node = node.children[i]
        node.keys.insert(bisect_right(node.keys, key), key)

    # ------------------------------------------------------------- deletion

    def delete(self, key: int) -> bool:
        """Remove key; return False if the tree is empty or lacks it."""
        if self._root is None:
            return False
        deleted = self._delete(self._root, key)
        if not self._root.keys:
            self._root = None if self._root.leaf else self._root.children[0]
        return deleted

    def _delete(self, node: _BNode, key: int) -> bool:
        idx = bisect_left(node.keys, key)
        if idx < len(node.keys) and node.keys[idx] == key:
            if node.leaf:
                del node.keys[idx]
            else:
                self._remove_from_internal(node, idx)
            return True
        if node.leaf:
            return False
        at_end = idx == len(node.keys)
        if len(node.children[idx].keys) < self.t:
            self._fill(node, idx)
        if at_end and idx > len(node.keys):
            return self._delete(node.children[idx - 1], key)
        return self._delete(node.children[idx], key)

    def _remove_from_internal(self, node: _BNode, idx: int) -> None:
        key = node.keys[idx]
        left, right = node.children[idx], node.children[idx + 1]
        if len(left.keys) >= self.t:
            predecessor = left
            while not predecessor.leaf:
                predecessor = predecessor.children[-1]
            node.keys[idx] = predecessor.keys[-1]
            self._delete(left, node.keys[idx])
        elif len(right.keys) >= self.t:
            successor = right
            while not successor.leaf:
                successor = successor.children[0]
            node.keys[idx] = successor.keys[0]
            self._delete(right, node.keys[idx])
        else:
            self._merge(node, idx)
            self._delete(node.children[idx], key)

    def _fill(self, node: _BNode, idx: int) -> None:
        if idx != 0 and len(node.children[idx - 1].keys) >= self.t:
            self._borrow_from_prev(node, idx)
        elif idx != len(node.keys) and len(node.children[idx + 1].keys) >= self.t:
            self._borrow_from_next(node, idx)
        elif idx != len(node.keys):
            self._merge(node, idx)
        else:
            self._merge(node, idx - 1)

    @staticmethod
    def _borrow_from_prev(node: _BNode, idx: int) -> None:
        child, sibling = node.children[idx], node.children[idx - 1]
        child.keys.insert(0, node.keys[idx - 1])
        if not child.leaf:
            child.children.insert(0, sibling.children.pop())
        node.keys[idx - 1] = sibling.keys.pop()

    @staticmethod
    def _borrow_from_next(node: _BNode, idx: int) -> None:
        child, sibling = node.children[idx], node.children[idx + 1]
        child.keys.append(node.keys[idx])
        if not child.leaf:
            child.children.append(sibling.children.pop(0))
        node.keys[idx] = sibling.keys.pop(0)

    @staticmethod
    def _merge(node: _BNode, idx: int) -> None:
        child, sibling = node.children[idx], node.children[idx + 1]
        child.keys.append(node.keys.pop(idx))
        child.keys.extend(sibling.keys)
        if not child.leaf:
            child.children.extend(sibling.children)
        del node.children[idx + 1]

    # --------------------------------------------------------------- lookup

    def search(self, key: int) -> bool:
        """Return True if key is stored in the tree."""
        node = self._root
        while node is not None:
            idx = bisect_left(node.keys, key)
            if idx < len(node.keys) and node.keys[idx] == key:
                return True
            node = None if node.leaf else node.children[idx]
        return False

    def traverse(self) -> list[int]:
        """All keys in ascending order."""
        return list(self)

    def __iter__(self) -> Iterator[int]:
        return self._root.walk() if self._root else iter(())

    def __bool__(self) -> bool:
        return self._root is not None


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive B-tree menu on standard input."""
    argparse.ArgumentParser(description="Interactive B-tree menu.").parse_args(argv)
    tree = BTree(3)
    tokens = _tokens(sys.stdin)

    def read_int(prompt: str) -> Optional[int]:
        print(prompt, end="", flush=True)
        token = next(tokens, None)
        if token is None:
            raise EOFError
        try:
            return int(token)
        except ValueError:
            return None

    while True:
        print("\n\nMAIN MENU")
        print("\n1. Insert value")
        print("2. Delete value")
        print("3. Search value")
        print("4. Traverse")
        print("5. Exit")
        try:
            option = read_int("\nEnter your choice : ")
            if option == 1:
                value = read_int("\nEnter value to insert : ")
                if value is not None:
                    if tree.insert(value):
                        print(f"\n{value} inserted successfully")
                    else:
                        print(f"\n{value} already exists in the tree")
            elif option == 2:
                value = read_int("\nEnter value to delete : ")
                if value is not None:
                    if not tree:
                        print("\nTree is empty", file=sys.stderr)
                    elif tree.delete(value):
                        print(f"\n{value} deleted successfully")
                    else:
                        print(f"\n{value} not found in the tree", file=sys.stderr)
            elif option == 3:
                value = read_int("\nEnter value to search : ")
                if value is not None:
                    if not tree:
                        print("\nTree is empty")
                    elif tree.search(value):
                        print(f"\n{value} found in the tree")
                    else:
                        print(f"\n{value} not found in the tree")
            elif option == 4:
                if tree:
                    print("\nNodes in the tree are : " + " ".join(map(str, tree)))
                else:
                    print("\nTree is empty")
            elif option == 5:
                return 0
            else:
                print("\nEnter a valid option")
        except EOFError:
            return 0


if __name__ == "__main__":
    sys.exit(main())