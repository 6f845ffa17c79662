[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splc"
version = "0.1.0"
description = "Instruction building, encoding and binary object files for a simple stack machine, as used by an SPL compiler back end"
requires-python = ">=3.10"
dependencies = []
keywords = ["compiler", "code generation", "stack machine", "bof", "assembly"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["splc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
