[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tetrablocks"
version = "0.1.0"
description = "Rules, drawing and UI parts of a block-placing puzzle game on a 9x9 grid."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "blocks", "pygame", "grid"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["tetrablocks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
