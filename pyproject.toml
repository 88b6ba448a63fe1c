[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "matrixcalc"
version = "0.1.0"
description = "Small dense-matrix algebra library with a matrix calculator that reads commands from standard input"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "determinant", "inverse", "rank", "calculator"]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
matrixcalc = "matrixcalc.cli:main"

[tool.setuptools.packages.find]
include = ["matrixcalc*"]

[tool.pytest.ini_options]
addopts = "-ra"
