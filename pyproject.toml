[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lowbudgetspotify"
version = "0.1.0"
description = "A small terminal music catalogue with user accounts, song search and playlists stored in text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "playlist", "terminal", "catalogue"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lowbudgetspotify = "lowbudgetspotify.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lowbudgetspotify"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
