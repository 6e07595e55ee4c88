[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsdrills"
version = "0.1.0"
description = "Classic data-structure exercises: linked chains, sparse and triangular matrices, hash tables, heaps, trees, graphs and Huffman coding"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "education",
    "heap",
    "hash table",
    "huffman",
    "graph",
    "linked list",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsdrills-fib = "dsdrills.fibonacci:main"
dsdrills-subsets = "dsdrills.subsets:main"
dsdrills-josephus = "dsdrills.josephus:main"
dsdrills-delete-all = "dsdrills.stack:main"
dsdrills-triangular = "dsdrills.triangular:main"
dsdrills-sparse = "dsdrills.sparse:main"
dsdrills-hash-open = "dsdrills.hash_open:main"
dsdrills-hash-chains = "dsdrills.hash_chains:main"
dsdrills-deque = "dsdrills.ring_deque:main"
dsdrills-expression = "dsdrills.expression:main"
dsdrills-tree = "dsdrills.binary_tree:main"
dsdrills-heap-benchmark = "dsdrills.benchmark:main"
dsdrills-huffman = "dsdrills.huffman:main"

[tool.hatch.build.targets.wheel]
packages = ["dsdrills"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
