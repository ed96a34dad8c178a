[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treasuremap"
version = "0.1.0"
description = "Follow clues across a weighted map to find the treasure, by clue-guided depth-first search or by cheapest path."
requires-python = ">=3.10"
dependencies = []
keywords = ["graph", "dijkstra", "dfs", "treasure", "puzzle", "game"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.scripts]
treasuremap = "treasuremap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treasuremap"]

[tool.pytest.ini_options]
addopts = "-ra"
