[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sckit"
version = "2.0.0"
description = "Small building blocks: binary buffer, CRC-32C, heap, INI parser, linked list, logger, condition and array"
requires-python = ">=3.10"
dependencies = []
keywords = ["buffer", "crc32c", "heap", "ini", "linked-list", "logger", "serialization"]
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
packages = ["sckit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
