[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ambusim"
version = "0.1.0"
description = "Discrete time-step simulation of ambulance dispatch across a network of hospitals"
requires-python = ">=3.10"
dependencies = []
keywords = ["simulation", "ambulance", "hospital", "dispatch", "queue"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Scientific/Engineering :: Medical Science Apps.",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ambusim = "ambusim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ambusim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
