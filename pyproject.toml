[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ftls"
version = "0.1.0"
description = "Directory-entry helpers and a printf-style formatter with number, string, wide-character, colour and byte-buffer utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["directory", "lstat", "filesystem", "printf", "formatting"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ftls"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
