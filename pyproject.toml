[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rep"
version = "0.1.0"
description = "A small grep-like tool that prints the lines of files containing a fixed string"
requires-python = ">=3.10"
dependencies = []
keywords = ["grep", "search", "text", "filter", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rep = "rep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rep"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
