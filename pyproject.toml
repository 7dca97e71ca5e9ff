[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termcli"
version = "0.1.0"
description = "Building blocks for interactive command line interfaces: typed argument conversion, line editing, key decoding, scheduling and telnet negotiation"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "terminal", "line-editing", "telnet", "scheduler", "keyboard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
    "Topic :: Terminals",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["termcli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
