"""AVL tree, B-tree, trie, stacks, queues and infix/prefix/postfix expression tools."""

__version__ = "0.1.0"