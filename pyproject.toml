[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fuzzycoco"
version = "1.0.0"
description = "Building blocks for fuzzy rule-based systems: variables, metrics, genome codecs and evolutionary operators"
requires-python = ">=3.10"
dependencies = []
keywords = ["fuzzy logic", "fuzzy systems", "genetic algorithm", "coevolution", "machine learning"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fuzzycoco"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
