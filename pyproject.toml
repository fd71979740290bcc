[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "jvida"
version = "1.0.0"
description = "Conway's Game of Life on a square world, played from an interactive text menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["game of life", "cellular automaton", "simulation", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
jvida = "jvida.controller:main"

[tool.setuptools.packages.find]
include = ["jvida*"]

[tool.pytest.ini_options]
addopts = "-ra"
