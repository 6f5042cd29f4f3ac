[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linkqueue"
version = "0.1.0"
description = "A linked-list FIFO queue of integers with statistics and in-place editing helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["queue", "linked list", "fifo", "sliding window", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linkqueue = "linkqueue.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linkqueue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
