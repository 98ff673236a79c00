[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ctspsched"
version = "0.1.0"
description = "TSPLIB reader, Consistent TSP instance model and scheduler file-name helpers"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tsp",
    "tsplib",
    "consistent-tsp",
    "periodic-tsp",
    "vehicle-routing",
    "scheduling",
    "operations-research",
]
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
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ctspsched"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
