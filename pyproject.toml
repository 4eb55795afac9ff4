[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contest_solutions"
version = "0.1.0"
description = "Solutions to competitive programming tasks: ABC355 problems A-D and a crane terminal scheduling heuristic for AHC033."
requires-python = ">=3.10"
dependencies = []
keywords = ["competitive-programming", "atcoder", "algorithms", "heuristics", "simulation"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
abc355 = "contest_solutions.abc355:main"
ahc033 = "contest_solutions.ahc033:main"

[tool.hatch.build.targets.wheel]
packages = ["contest_solutions"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
