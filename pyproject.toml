[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algonotes"
version = "0.1.0"
description = "Small, readable implementations of classic algorithms, data structures and text patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data structures",
    "sorting",
    "searching",
    "red-black tree",
    "dijkstra",
    "topological sort",
    "patterns",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algonotes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
