[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "colstore"
version = "0.1.0"
description = "Typed in-memory column tables with mask filtering and relational operators, plus a small employee registry kept in binary search trees"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "table",
    "column",
    "in-memory",
    "relational",
    "binary-search-tree",
    "employees",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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

[project.scripts]
colstore-employees = "colstore.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["colstore"]

[tool.pytest.ini_options]
addopts = "-ra"
