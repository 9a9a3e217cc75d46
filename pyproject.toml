[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "binarytrees"
version = "0.1.0"
description = "Binary trees, binary search trees, AVL trees and max binary heaps built from linked nodes"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "binary tree",
    "binary search tree",
    "avl",
    "heap",
    "data structures",
    "traversal",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
binarytrees-demo = "binarytrees.demos:main"

[tool.hatch.build.targets.wheel]
packages = ["binarytrees"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
