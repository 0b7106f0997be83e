[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gfmkit"
version = "0.1.0"
description = "GitHub Flavored Markdown extension building blocks: tables, task lists, autolinks and tag filtering"
requires-python = ">=3.10"
dependencies = []
keywords = ["markdown", "gfm", "commonmark", "tables", "autolink", "tasklist"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: Markdown",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gfmkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
