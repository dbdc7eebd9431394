[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pokemonle"
version = "0.1.0"
description = "Typed read-only access to a Pokédex SQLite database: entities, localized names, pagination and lookups."
requires-python = ">=3.10"
dependencies = []
keywords = ["pokemon", "pokedex", "sqlite", "database", "pagination", "localization"]
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
    "Topic :: Database",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pokemonle"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
