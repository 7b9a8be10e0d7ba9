[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tilepath"
version = "0.1.0"
description = "A* path finding on tile maps loaded from JSON, with coordinate listings and ASCII drawings of the path"
requires-python = ">=3.10"
dependencies = []
keywords = ["a-star", "pathfinding", "tile map", "grid", "heuristic"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tilepath = "tilepath.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tilepath"]

[tool.pytest.ini_options]
addopts = "-ra"
