[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolutions"
version = "0.1.0"
description = "Solutions to the Advent of Code puzzles of 2023 and 2024, as importable functions and a small command."
requires-python = ">=3.10"
keywords = ["advent of code", "puzzles", "algorithms"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "networkx",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
adventsolutions = "adventsolutions.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
