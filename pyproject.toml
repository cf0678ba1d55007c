[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "astratrader"
version = "0.1.0"
description = "Text-mode screens, ASCII art, colours and JSON save files for a terminal space trading game"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "space", "trading", "terminal", "ascii-art", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["astratrader"]

[tool.pytest.ini_options]
addopts = "-ra"
