[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bluehal_utils"
version = "0.1.0"
description = "Small helpers for embedded tooling: bit checks, buffer filling, guards, sequence scanning, memory region overlaps and an XMODEM message parser."
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "xmodem", "bitwise", "memory", "flash", "firmware"]
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
packages = ["bluehal_utils"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
