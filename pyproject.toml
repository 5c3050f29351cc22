[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dante"
version = "0.1.0"
description = "Generate perfect or imperfect text mazes and solve them."
requires-python = ">=3.10"
dependencies = []
keywords = ["maze", "labyrinth", "generator", "solver", "puzzle"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dante-generator = "dante.generator:main"
dante-solver = "dante.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["dante"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
