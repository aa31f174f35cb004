[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "airwatcher"
version = "0.1.0"
description = "Air quality estimation from sensor measurements, with detection of diverted sensors and an interactive console menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["air quality", "sensors", "interpolation", "pollution", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Atmospheric Science",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
airwatcher = "airwatcher.cli:main"

[tool.setuptools.packages.find]
include = ["airwatcher*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
