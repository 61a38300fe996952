[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "icommon"
version = "0.1.0"
description = "Common building blocks: binary data streams, text parsing, debug logging, FIFOs, range maps, object pools, threads and timers"
requires-python = ">=3.10"
dependencies = []
keywords = ["streams", "binary", "logging", "fifo", "range-map", "memory-pool", "bitfield"]
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
packages = ["icommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
