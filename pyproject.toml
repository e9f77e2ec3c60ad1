[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "serpent"
version = "0.4.0"
description = "Terminal snake games in five stages, from a one-cell sketch to walls, wrap-around holes and apples."
requires-python = ">=3.10"
dependencies = []
keywords = ["snake", "game", "terminal", "ansi", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
serpent-prototype = "serpent.prototype:main"
serpent-straight = "serpent.straight:main"
serpent-steering = "serpent.steering:main"
serpent-walls = "serpent.walls:main"
serpent-apples = "serpent.apples:main"

[tool.hatch.build.targets.wheel]
packages = ["serpent"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
