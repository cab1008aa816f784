[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rkode"
version = "0.1.0"
description = "Adaptive and fixed-step Runge-Kutta ODE solvers with dense output interpolation"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["ode", "runge-kutta", "integration", "verner", "tsitouras", "numerical"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rkode"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
