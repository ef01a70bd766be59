[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stackyard"
version = "0.1.0"
description = "Sort typed containers into their own stacks by moving them one at a time between stacks"
requires-python = ">=3.10"
dependencies = []
keywords = ["stacks", "sorting", "containers", "puzzle", "algorithm"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Natural Language :: Russian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stackyard = "stackyard.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["stackyard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
