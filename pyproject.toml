[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tm25rays"
version = "0.1.0"
description = "TM-25 ray file headers and checks, ray item layouts, ray arrays, a Sobol sequence and small text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["optics", "ray file", "TM-25", "illumination", "ray tracing", "Sobol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tm25rays"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
