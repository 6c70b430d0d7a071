[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sparsegrb"
version = "0.1.0"
description = "Sparse matrices, vectors, views and semiring algorithms in the GraphBLAS style"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphblas", "sparse", "matrix", "semiring", "linear-algebra", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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

[tool.hatch.build.targets.wheel]
packages = ["sparsegrb"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
