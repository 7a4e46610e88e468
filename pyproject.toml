[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "poincareviz"
version = "0.1.0"
description = "Three-dimensional scatter views of Poincaré sections, periodic points and invariant manifolds read from plain-text point files"
requires-python = ">=3.10"
dependencies = [
    "matplotlib",
]
keywords = [
    "poincare section",
    "invariant manifolds",
    "dynamical systems",
    "stokes flow",
    "visualisation",
    "scatter plot",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["poincareviz"]

[tool.pytest.ini_options]
addopts = "-ra"
