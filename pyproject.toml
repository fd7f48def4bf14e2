[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "basicalgos"
version = "0.1.0"
description = "Classic teaching algorithms: sorting, searching, number routines, statistics, matrix multiplication and text patterns."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "searching", "education", "patterns"]
classifiers = [
    "Topic :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
basicalgos = "basicalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["basicalgos"]

[tool.pytest.ini_options]
addopts = "-ra"
