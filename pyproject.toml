[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "latticeqcd"
version = "0.1.0"
description = "Lattice QCD field utilities: gauge and spinor fields, Wilson loops, straight paths, fuzzing, Z2 sources, checksums and binary field readers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["lattice", "qcd", "gauge field", "wilson loop", "spinor", "fuzzing", "physics"]
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["latticeqcd"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
