[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shelfkeeper"
version = "1.0.0"
description = "A small interactive terminal application for keeping track of a library's books."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "catalogue", "cli", "borrowing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
shelfkeeper = "shelfkeeper.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["shelfkeeper"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
