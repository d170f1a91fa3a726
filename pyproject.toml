[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "wardbook"
version = "0.1.0"
description = "A small SQLite-backed register of patients, doctors, emergency admissions and hospital rooms."
requires-python = ">=3.10"
dependencies = []
keywords = ["hospital", "sqlite", "patients", "doctors", "rooms", "records"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database :: Front-Ends",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wardbook = "wardbook.cli:main"

[tool.setuptools.packages.find]
include = ["wardbook*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
