[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "campominado"
version = "1.0.0"
description = "A terminal minesweeper game with three difficulty levels and a move-by-move game log."
requires-python = ">=3.10"
dependencies = []
keywords = ["minesweeper", "campo minado", "game", "terminal", "puzzle"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
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
campominado = "campominado.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["campominado"]

[tool.pytest.ini_options]
addopts = "-ra"
