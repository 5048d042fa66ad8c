[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splinelab"
version = "0.1.0"
description = "Uniform and geometric grids, natural cubic splines and finite-difference derivatives"
requires-python = ">=3.10"
dependencies = []
keywords = ["spline", "cubic spline", "interpolation", "numerical differentiation", "grid"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
splinelab = "splinelab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["splinelab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
