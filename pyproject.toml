[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patience"
version = "0.1.0"
description = "Klondike solitaire played with the mouse, built on pygame"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["solitaire", "klondike", "patience", "cards", "game", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
patience = "patience.app:main"

[tool.hatch.build.targets.wheel]
packages = ["patience"]

[tool.pytest.ini_options]
addopts = "-ra"
