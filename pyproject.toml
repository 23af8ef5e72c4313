[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pescope"
version = "0.5.0"
description = "Read the structures of Portable Executable files: sections, TLS, certificates and common ordinals"
requires-python = ">=3.10"
dependencies = []
keywords = ["pe", "portable-executable", "parser", "sections", "tls", "reverse-engineering"]
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
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pescope"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
