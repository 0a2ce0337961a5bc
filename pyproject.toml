[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "malha"
version = "0.1.0"
description = "Build a doubly connected edge list from a polygonal mesh and check its topology"
requires-python = ">=3.10"
dependencies = []
keywords = ["dcel", "half-edge", "mesh", "topology", "sweep line", "computational geometry"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
malha = "malha.cli:main"

[tool.setuptools.packages.find]
include = ["malha*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
