# structkit

Classic data structures and small expression tools, in plain Python with no
third-party dependencies.

## What is inside

| Module                  | Contents                                                                 |
|-------------------------|--------------------------------------------------------------------------|
| `structkit.avl`         | `AVLTree`, a self-balancing binary search tree of unique integers        |
| `structkit.btree`       | `BTree`, a B-tree of minimum degree *t* (default 3) holding unique keys  |
| `structkit.trie`        | `Trie`, a prefix tree of words with insert, delete, search and update    |
| `structkit.stacks`      | `ArrayStack` (bounded) and `LinkedStack` (unbounded)                     |
| `structkit.queues`      | `StaticQueue`, `CircularQueue`, `LinkedQueue` and a bounded `Deque`      |
| `structkit.expressions` | Evaluation and conversion of infix, prefix and postfix expressions       |

## Installation

```
pip install .
```

## Trees and tries

`insert` and `delete` return `True` when the structure changed and `False`
when the value was already present or was missing.

```python
from structkit.avl import AVLTree

tree = AVLTree([30, 10, 20, 40])
20 in tree         # True
len(tree)          # 4
tree.delete(10)    # True
tree.preorder()    # root first
tree.inorder()     # ascending order, same as list(tree)
tree.postorder()
```

```python
from structkit.btree import BTree

btree = BTree(t=3, keys=range(1, 11))   # t must be at least 2
btree.delete(5)              # True
btree.search(5)              # False
btree.traverse()             # keys in ascending order, same as list(btree)
```

```python
from structkit.trie import Trie

trie = Trie()
trie.insert("tree")
trie.insert("trie")
trie.search("tree")          # True
"trie" in trie               # True
trie.update("tree", "treap") # True
trie.words()                 # ['treap', 'trie'], in lexicographic order
```

`Trie.update` removes the old word whenever it is present, even when the new
word already exists; it returns `True` only if both steps succeeded. Deleting
a word prunes nodes that no longer lead to any word.

## Stacks and queues

The bounded containers (`ArrayStack`, `StaticQueue`, `CircularQueue`,
`Deque`) take a `capacity` argument, 5 by default; a capacity below 1 raises
`ValueError`.

- Pushing onto a full `ArrayStack` raises `StackOverflowError`; popping or
  peeking an empty stack raises `StackUnderflowError` (an `IndexError`).
- Adding to a full queue or deque raises `QueueFullError`; taking from or
  peeking an empty one raises `QueueEmptyError` (an `IndexError`).

Stacks iterate from top to bottom; queues iterate from front to rear, and
`reversed(deque)` goes from rear to front.

```python
from structkit.stacks import ArrayStack, LinkedStack
from structkit.queues import CircularQueue, Deque, LinkedQueue, StaticQueue

stack = LinkedStack([1, 2])
stack.pop()                  # 2

queue = CircularQueue()
queue.enqueue(7)
queue.peek()                 # 7

deque = Deque()
deque.push_front(1)
deque.push_back(2)
deque.is_full()              # False
list(reversed(deque))        # [2, 1]
```

`StaticQueue` does not reuse a slot freed by `dequeue` until the queue has been
emptied completely; `CircularQueue` reuses freed slots at once and
`LinkedQueue` has no limit.

## Expressions

```python
from structkit.expressions import (
    evaluate_infix,
    evaluate_postfix,
    evaluate_prefix,
    infix_to_postfix,
    infix_to_prefix,
    postfix_to_infix,
    postfix_to_prefix,
    prefix_to_infix,
    prefix_to_postfix,
)

evaluate_infix("3+4*2")      # 11
evaluate_postfix("3 4 +")    # 7
evaluate_prefix("- 10 4")    # 6
infix_to_postfix("a+b*c")    # 'abc*+'
infix_to_prefix("a+b*c")     # '+a*bc'
postfix_to_infix("ab+")      # '(a+b)'
prefix_to_postfix("+ab")     # 'ab+'
```

The evaluation functions take non-negative multi-digit integers and the
operators `+ - * /`; division is integer division truncating towards zero,
and dividing by zero raises `ZeroDivisionError`. Characters they do not
recognise are skipped. The conversion functions work on single-character
operands (ASCII letters or digits); the infix converters also accept `^` and
parentheses. Malformed input, such as a missing operand or unbalanced
parentheses, raises `ExpressionError` (a `ValueError`).

## Command-line tools

Each structure comes with an interactive, menu-driven console program that
reads its choices from standard input and stops at the Exit option or at the
end of input:

```
structkit-avl
structkit-btree
structkit-trie
structkit-stacks [array|linked]                       # default: array
structkit-queues [static|circular|linked|deque]       # default: circular
```

`structkit-expressions` processes one expression, given as an argument or
read from a line of standard input:

```
structkit-expressions evaluate-infix "3+4*2"
structkit-expressions infix-to-postfix "a+b*c"
```

Its operations are `evaluate-infix`, `infix-to-postfix`, `infix-to-prefix`,
`evaluate-postfix`, `postfix-to-infix`, `postfix-to-prefix`,
`evaluate-prefix`, `prefix-to-infix` and `prefix-to-postfix`. On a malformed
expression or division by zero it prints an error and exits with status 1.

## What it does not do

Every structure lives in memory only. There is no saving to or loading from
files, so whatever is entered in the interactive programs is gone when they
exit.

## Running the tests

```
pip install .[test]
pytest
```