[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quickfind"
version = "0.1.0"
description = "A small line-driven launcher that searches a folder by file name and opens what it finds"
requires-python = ">=3.10"
dependencies = []
keywords = ["launcher", "search", "files", "finder", "mime"]
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
    "Topic :: Desktop Environment :: File Managers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
quickfind = "quickfind.app:main"

[tool.hatch.build.targets.wheel]
packages = ["quickfind"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
