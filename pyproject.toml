[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sint7"
version = "0.1.0"
description = "SINT-7: a side-scrolling puzzle adventure about a discontinued AI recovering its memory fragments"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "puzzle", "adventure", "pygame", "side-scroller"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sint7 = "sint7.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sint7"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
