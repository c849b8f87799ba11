[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dedupfiles"
version = "0.1.0"
description = "Find files with identical contents in a directory by SHA-256 hash and move the extra copies into a recycle-bin directory."
requires-python = ">=3.10"
dependencies = []
keywords = ["deduplication", "duplicates", "files", "sha256", "hash"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dedupfiles = "dedupfiles.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dedupfiles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
