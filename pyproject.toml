[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubparse"
version = "0.1.0"
description = "Parser and validator for .cub scene description files used by raycasting games"
requires-python = ">=3.10"
dependencies = []
keywords = ["cub", "raycasting", "parser", "map", "validation", "scene"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cubparse = "cubparse.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
