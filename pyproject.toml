[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "handson"
version = "0.1.0"
description = "Hands-on exercises: a coffee-brewing simulation and a household account book kept in a text file or SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "hands-on",
    "simulation",
    "sqlite",
    "account book",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
handson-coffee = "handson.coffee:main"
handson-entry = "handson.entry:main"
handson-accountbook = "handson.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["handson"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
