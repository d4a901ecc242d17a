[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "portkit"
version = "0.1.0"
description = "Portable system helpers: byte order, bit reversal, date and time, hex dumps, file system access and thread-based task primitives"
requires-python = ">=3.10"
dependencies = []
keywords = ["endian", "byte-order", "bit-reversal", "date", "filesystem", "rtos", "embedded"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["portkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
