[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fslibc"
version = "0.1.0"
description = "Small C-library style string, memory, search and stream routines with pluggable character I/O"
requires-python = ">=3.10"
dependencies = []
keywords = ["libc", "printf", "strtok", "bsearch", "memmove", "stream", "embedded"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fslibc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
