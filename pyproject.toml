[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "structkit"
version = "0.1.0"
description = "Classic data structures and expression tools: AVL tree, B-tree, trie, stacks, queues and infix/prefix/postfix conversion."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data-structures",
    "avl-tree",
    "b-tree",
    "trie",
    "stack",
    "queue",
    "deque",
    "infix",
    "postfix",
    "prefix",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
structkit-avl = "structkit.avl:main"
structkit-trie = "structkit.trie:main"
structkit-btree = "structkit.btree:main"
structkit-queues = "structkit.queues:main"
structkit-stacks = "structkit.stacks:main"
structkit-expressions = "structkit.expressions:main"

[tool.hatch.build.targets.wheel]
packages = ["structkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
