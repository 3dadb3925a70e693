[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpqchat"
version = "0.1.0"
description = "Terminal peer-to-peer chat toolkit: chat screen rendering, slash commands and a keyboard menu"
requires-python = ">=3.10"
dependencies = [
    "blessed",
]
keywords = ["chat", "p2p", "terminal", "tui", "menu"]
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
    "Topic :: Communications :: Chat",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["dpqchat"]

[tool.hatch.build.targets.sdist]
include = ["dpqchat", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
