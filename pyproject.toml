[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomasulo"
version = "0.1.0"
description = "Cycle-by-cycle simulator of Tomasulo's algorithm for a small eight-register instruction set"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tomasulo",
    "simulator",
    "out-of-order execution",
    "reservation station",
    "computer architecture",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tomasulo = "tomasulo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tomasulo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
