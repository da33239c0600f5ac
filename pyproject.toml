[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solidasm"
version = "0.1.0"
description = "Shared definitions and block-buffered file I/O for a Z80 macro assembler that writes REL object files"
requires-python = ">=3.10"
dependencies = []
keywords = ["z80", "assembler", "rel", "object-file", "cross-assembler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["solidasm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
