[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ediconv"
version = "0.1.0"
description = "Convert EDIFACT messages to XML and back, guided by an XML message schema"
requires-python = ">=3.10"
dependencies = [
    "lxml",
]
keywords = ["edifact", "edi", "xml", "pricat", "conversion"]
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
    "Topic :: Text Processing :: Markup :: XML",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["ediconv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
