[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "utestlite"
version = "1.0.0"
description = "A small, dependency-free unit testing toolkit with descriptive assertions and a timing test runner"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "unit-test", "assertions", "test-runner"]
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
    "Topic :: Software Development :: Testing :: Unit",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["utestlite"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
