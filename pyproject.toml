[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "viper-engine"
version = "0.1.0"
description = "A small 2D game engine on pygame, with a scrolling starfield and drum-pad demo"
requires-python = ">=3.10"
keywords = ["game", "engine", "2d", "pygame", "starfield"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: pygame",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
viper-engine = "viper_engine.game:main"

[tool.hatch.build.targets.wheel]
packages = ["viper_engine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
