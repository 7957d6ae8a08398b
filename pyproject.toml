[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmconsole"
version = "0.1.0"
description = "Game-master console for a 2D tactical space map: template database, GM actions, camera, grid and map icons."
requires-python = ">=3.10"
keywords = ["game", "simulation", "game-master", "rts", "map", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gmconsole = "gmconsole.app:main"

[tool.hatch.build.targets.wheel]
packages = ["gmconsole"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
