[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "swapcheck"
version = "0.1.0"
description = "Checker and randomized tester for push_swap stack-sorting programs"
requires-python = ">=3.10"
dependencies = []
keywords = ["push_swap", "checker", "tester", "sorting", "stacks"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
swapcheck-tester = "swapcheck.tester:main"
swapcheck-checker = "swapcheck.checker:main"

[tool.hatch.build.targets.wheel]
packages = ["swapcheck"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
