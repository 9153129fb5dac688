[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ritz"
version = "0.1.0"
description = "A tiny content-addressed version control system with a git-like command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["vcs", "version-control", "commit", "branch", "sha1"]
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
    "Topic :: Software Development :: Version Control",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
my_cli = "ritz.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ritz"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
