[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ssdlab"
version = "0.1.0"
description = "A simulated SSD with a write-back command buffer, and test-shell commands that drive an SSD program"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssd", "nand", "simulator", "test shell", "command buffer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["ssdlab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
