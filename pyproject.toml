[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsworkbench"
version = "0.1.0"
description = "Classic data structures and graph algorithms: trees, heaps, queues, lists, hash tables and graph analysis"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "graph",
    "avl tree",
    "b-tree",
    "binomial heap",
    "fibonacci heap",
    "fenwick tree",
    "bloom filter",
    "cuckoo hashing",
    "linked list",
    "deque",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Software Development :: Libraries",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dsworkbench"]

[tool.pytest.ini_options]
addopts = "-ra"
