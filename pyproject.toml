[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mirtree"
version = "1.0.0"
description = "Lazily expanded file tree with sorting, click callbacks and small file and text helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["file tree", "file browser", "directory", "csv", "text utilities"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
mirtree = "mirtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mirtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
