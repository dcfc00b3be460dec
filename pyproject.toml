[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "surfacegeom"
version = "0.1.0"
description = "Differential geometry of parametrized surfaces: tangents, fundamental forms, curvature, Christoffel symbols and triangle utilities"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["differential geometry", "surfaces", "curvature", "christoffel symbols", "mesh", "ray intersection"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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

[tool.setuptools.packages.find]
include = ["surfacegeom*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
