[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stocksim"
version = "0.1.0"
description = "Schedule production processes from an initial stock towards a goal, and check execution traces."
requires-python = ">=3.10"
dependencies = []
keywords = ["scheduling", "simulation", "stock", "processes", "trace"]
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stocksim = "stocksim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stocksim"]

[tool.pytest.ini_options]
addopts = "-ra"
