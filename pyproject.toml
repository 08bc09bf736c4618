[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matstats"
version = "0.1.0"
description = "Row, column and vector statistics with missing values and one-based index subsets"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "statistics", "cumulative", "order statistics", "missing values", "subsetting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["matstats"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
