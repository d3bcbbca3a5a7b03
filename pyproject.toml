[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fifocache"
version = "0.1.0"
description = "A bounded FIFO cache backed by a hash table, an insertion-ordered list and a binary search tree, with a JSON-driven test-case runner."
requires-python = ">=3.10"
dependencies = []
keywords = ["cache", "fifo", "hash table", "linked list", "binary search tree", "data structures"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fifocache = "fifocache.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fifocache"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
