[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pushswap"
version = "1.0.0"
description = "Sort a stack of integers with a limited set of stack operations, and check move sequences against it."
requires-python = ">=3.10"
dependencies = []
keywords = ["push_swap", "sorting", "stacks", "puzzle", "algorithm", "checker"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
push-swap = "pushswap.cli:main"
push-swap-checker = "pushswap.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["pushswap"]

[tool.pytest.ini_options]
addopts = "-ra"
