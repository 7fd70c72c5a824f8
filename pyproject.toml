[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wetee"
version = "0.1.0"
description = "Building blocks for DAO voting: decision curves, fixed-point helpers, governance records and an in-memory contract environment"
requires-python = ">=3.10"
dependencies = []
keywords = ["dao", "governance", "voting", "curve", "fixed-point", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wetee"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
