[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "so_long"
version = "1.0.0"
description = "A small tile-based 2D game: collect every item, then reach the exit."
requires-python = ">=3.10"
keywords = ["game", "2d", "tile", "puzzle", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
so_long = "so_long.app:main"

[tool.hatch.build.targets.wheel]
packages = ["so_long"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
