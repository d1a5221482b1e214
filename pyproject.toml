[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bastion"
version = "0.1.0"
description = "Game rules for a lane-based tower defense: enemies, waves, tower slots, shop and skill tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["tower-defense", "game", "simulation", "waves"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Real Time Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bastion"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
