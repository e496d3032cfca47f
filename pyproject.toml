[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "automatonsets"
version = "0.1.0"
description = "Parse finite automata written in set notation and query their states, alphabet and transitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["automaton", "finite automaton", "sets", "formal languages", "parsing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
automatonsets = "automatonsets.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["automatonsets"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
