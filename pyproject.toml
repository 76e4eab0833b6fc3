[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonetl"
version = "1.0.0"
description = "Config-driven ETL that loads nested JSON documents into relational tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["etl", "json", "postgresql", "sql", "data-loading", "schema"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jsonetl = "jsonetl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jsonetl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
