[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lightsgrid"
version = "0.0.1"
description = "A terminal lights-toggling puzzle, an animated half-block bitmap canvas and a few small numeric helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "lights out", "terminal", "game", "bitmap", "ansi"]
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
lightsgrid = "lightsgrid.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lightsgrid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
