[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "opinionated"
version = "0.1.0"
description = "Console account management for a survey application, with survey and question records in binary files"
requires-python = ">=3.10"
dependencies = []
keywords = ["survey", "questionnaire", "console", "users", "accounts"]
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
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
opinionated = "opinionated.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["opinionated"]

[tool.pytest.ini_options]
addopts = "-ra"
