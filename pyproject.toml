[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "idvmonopoly"
version = "0.1.0"
description = "A three-player board game of decoding progress, ability cards and a final race to the door, played in the terminal."
requires-python = ">=3.10"
dependencies = []
keywords = ["board game", "monopoly", "dice", "terminal game", "hot-seat"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
idvmonopoly = "idvmonopoly.cli:main"

[tool.setuptools.packages.find]
include = ["idvmonopoly*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
