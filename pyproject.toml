[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stardesk"
version = "0.1.0"
description = "Sky computations for a star desktop: sidereal time, horizontal coordinates, moon phase, planet positions and Hipparcos star data."
requires-python = ">=3.10"
dependencies = []
keywords = ["astronomy", "planets", "moon phase", "hipparcos", "sidereal time", "stereographic projection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stardesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
