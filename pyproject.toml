[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "safecracker"
version = "0.1.0"
description = "Brute-force solver for rotating-ring safe puzzles, with a small toolkit of string, number and matrix helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "safe", "solver", "brute-force", "rings"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["safecracker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
