[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tonalkit"
version = "0.1.0"
description = "Music theory toolkit: notes, intervals, pitch class sets, MIDI helpers, chord types and chord detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "music-theory", "notes", "intervals", "chords", "midi", "pcset"]
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
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tonalkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
