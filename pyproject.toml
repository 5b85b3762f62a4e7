[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phantomlite"
version = "0.1.0"
description = "Enemy behaviour, steering and spawning logic for a top-down action RPG"
requires-python = ">=3.10"
keywords = ["game", "rpg", "enemy-ai", "steering", "context-steering"]
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
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["phantomlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
