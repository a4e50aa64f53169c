[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipinghot"
version = "0.1.0"
description = "Piping Hot: a pipe-routing puzzle game with Tiled level loading and a text-mode game loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "pipes", "tiled", "tmx"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipinghot = "pipinghot.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pipinghot"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
