[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tgview"
version = "0.0.3"
description = "Terminal genome viewer core: start-up settings, genome intervals and text layout of alignments, coverage, coordinates, cytobands, gene tracks and sequence."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "genomics",
    "bioinformatics",
    "bam",
    "cigar",
    "genome-browser",
    "terminal",
    "cytoband",
    "coverage",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tgview"]

[tool.hatch.build.targets.sdist]
include = ["tgview", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
