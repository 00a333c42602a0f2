[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "calgkit"
version = "1.2.0"
description = "Classic data structures: double-ended queue, sorted array, red-black tree, hash set and singly-linked list."
requires-python = ">=3.10"
dependencies = []
keywords = ["data-structures", "queue", "red-black-tree", "hash-set", "linked-list", "sorted-array"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["calgkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
