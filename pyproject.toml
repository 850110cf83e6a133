[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vcdscan"
version = "0.1.0"
description = "Read Value Change Dump files and report signals that never change"
requires-python = ">=3.10"
dependencies = []
keywords = ["vcd", "value change dump", "verilog", "waveform", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
vcdscan = "vcdscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["vcdscan"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
