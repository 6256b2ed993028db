[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chaosutil"
version = "0.1.0"
description = "Small utilities for long-running processes: option matching, counted handles, atomic counters, a fast seeded random generator, time helpers and signal waiting."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "random", "signals", "daemon", "arguments", "reference counting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
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
packages = ["chaosutil"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
