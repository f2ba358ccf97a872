[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hbackup"
version = "0.1.4"
description = "A small, cross-platform command-line tool for defining and running file backup jobs."
requires-python = ">=3.10"
keywords = ["hbackup", "bk", "backup", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Archiving :: Backup",
    "Topic :: Utilities",
]
dependencies = [
    "platformdirs",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bk = "hbackup.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hbackup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
