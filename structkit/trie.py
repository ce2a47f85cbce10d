"""Prefix tree of words with an interactive menu."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional


@dataclass(eq=False)
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_word: bool = False


class Trie:
    """A set of words stored character by character."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def insert(self, word: str) -> bool:
        """Add word; return False if it was already present."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        if node.is_word:
            return False
        node.is_word = True
        return True

    def delete(self, word: str) -> bool:
        """Remove word and prune nodes left unused; return False if absent."""
        node = self._root
        path: list[_TrieNode] = []
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append(node)
            node = child
        if not node.is_word:
            return False
        node.is_word = False

        for parent, ch in zip(reversed(path), reversed(word)):
            if node.children or node.is_word:
                break
            del parent.children[ch]
            node = parent
        return True

    def search(self, word: str) -> bool:
        """Return True if word was inserted as a whole word."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return False
        return node.is_word

    def update(self, old_word: str, new_word: str) -> bool:
        """Replace old_word by new_word.

        old_word is removed whenever it is present, even if new_word turns
        out to exist already; the result is True only if both steps succeed.
        """
        if not self.delete(old_word):
            return False
        return self.insert(new_word)

    def words(self) -> list[str]:
        """All stored words in lexicographic order."""
        return list(self._walk(self._root, ""))

    def _walk(self, node: _TrieNode, prefix: str) -> Iterator[str]:
        if node.is_word:
            yield prefix
        for ch in sorted(node.children):
            yield from self._walk(node.children[ch], prefix + ch)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)


def _parse_choice(raw: str) -> Optional[int]:
    return int(raw) if raw.lstrip("+-").isdigit() else None


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive trie menu on standard input."""
    argparse.ArgumentParser(description="Interactive trie menu.").parse_args(argv)
    trie = Trie()
    pending = (token for line in sys.stdin for token in line.split())

    def ask(prompt: str) -> str:
        print(prompt, end="", flush=True)
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    def word_action(verb: str, act: Callable[[str], bool], done: str, failed: str):
        def run() -> None:
            word = ask(f"\nEnter word to {verb} : ")
            print(f"\n{word} {done if act(word) else failed}")

        return run

    def update() -> None:
        old_word = ask("\nEnter word to replace : ")
        new_word = ask("\nEnter replacing word : ")
        if trie.update(old_word, new_word):
            print(f"\n{old_word} updated to {new_word} successfully")
        else:
            print(
                f"\nUpdate failed! Either {old_word} does not exist "
                f"or {new_word} already exists or both"
            )

    actions: list[tuple[str, Callable[[], None]]] = [
        ("Insert word", word_action(
            "insert", trie.insert, "inserted successfully", "already exists in the trie")),
        ("Delete word", word_action(
            "delete", trie.delete, "deleted successfully", "not found in the trie")),
        ("Search word", word_action(
            "search", trie.search, "found in the trie", "not found in the trie")),
        ("Update word", update),
        ("Display words", lambda: print("\nWords in the trie are : " + " ".join(trie.words()))),
    ]
    exit_choice = len(actions) + 1

    try:
        while True:
            print("\n\nMAIN MENU\n")
            for number, (label, _) in enumerate(actions, 1):
                print(f"{number}. {label}")
            print(f"{exit_choice}. Exit")
            choice = _parse_choice(ask("\nEnter your choice : "))
            if choice == exit_choice:
                print("\nProgram exited successfully")
                return 0
            if choice is not None and 1 <= choice < exit_choice:
                actions[choice - 1][1]()
            else:
                print("\nPlease enter a valid option")
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())