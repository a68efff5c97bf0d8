[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kasyno"
version = "0.1.0"
description = "A text-command casino economy: jobs, crimes, a bank, a shop and gambling games backed by SQLite."
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = [
    "casino",
    "economy",
    "blackjack",
    "slots",
    "crash",
    "scratch card",
    "sqlite",
    "game",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Polish",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kasyno = "kasyno.bot:main"

[tool.hatch.build.targets.wheel]
packages = ["kasyno"]

[tool.hatch.build.targets.sdist]
include = [
    "kasyno",
    "tests",
]

[tool.pytest.ini_options]
addopts = "-ra"
