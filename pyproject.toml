[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ledgerchain"
version = "0.1.0"
description = "A small hash-linked ledger of text blocks with validation, a pipe-delimited file format and a console menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["ledger", "blockchain", "hash chain", "checksum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ledgerchain = "ledgerchain.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ledgerchain"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
