[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bnmo"
version = "0.1.0"
description = "Word-reading machines and small bounded collection types: arrays, queues, stacks, maps, sets, a 2048 grid and ternary trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["data structures", "queue", "stack", "map", "set", "matrix", "tree", "2048", "word reader"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bnmo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
