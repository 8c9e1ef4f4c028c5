[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipekit"
version = "0.1.0"
description = "Run two commands as a pipeline from an input file to an output file, with small character, number, buffer, string and list helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "pipe", "shell", "subprocess", "strings", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipekit = "pipekit.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["pipekit"]

[tool.pytest.ini_options]
addopts = "-ra"
