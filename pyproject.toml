[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "blockengine"
version = "0.1.0"
description = "A small 2D game toolkit: vector and matrix math, colours, sprite batching, keyboard state, a game-state stack and a falling-block puzzle board."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "falling-blocks", "sprite", "vector", "matrix", "quaternion"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["blockengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
