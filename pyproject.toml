[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "typetest"
version = "0.1.0"
description = "A command-line typing test that records accuracy and words per minute"
requires-python = ">=3.10"
keywords = ["typing", "typing-test", "wpm", "accuracy", "cli"]
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
    "Topic :: Education",
]
dependencies = [
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
typetest = "typetest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["typetest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
