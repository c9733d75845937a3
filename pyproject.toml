[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algolib"
version = "0.1.0"
description = "Graph algorithms, bipartite matchings, matroids and number theory in plain Python"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "graphs",
    "strongly-connected-components",
    "2-sat",
    "matching",
    "link-cut-tree",
    "number-theory",
    "modular-arithmetic",
    "matroid",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algolib"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
