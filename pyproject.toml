[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mnacircuit"
version = "0.1.0"
description = "AC circuit analysis by modified nodal analysis, with worked example circuits"
requires-python = ">=3.10"
dependencies = []
keywords = ["circuit", "mna", "nodal analysis", "ac", "phasor", "electronics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mnacircuit = "mnacircuit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mnacircuit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
