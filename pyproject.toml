[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timed_automata"
version = "0.1.0"
description = "Timed input/output automata: locations, edges, clock constraints, specifications and parallel composition."
requires-python = ">=3.10"
dependencies = []
keywords = ["timed automata", "TIOA", "clock constraints", "parallel composition", "verification"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["timed_automata"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
