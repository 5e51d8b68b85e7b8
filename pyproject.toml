[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortkit"
version = "0.1.0"
description = "Classic sorting algorithms: counting, radix, insertion, merge, bucket and quicksort variants, with inversion counting, a traced quicksort and a small command line tool."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "sorting",
    "algorithms",
    "quicksort",
    "radix-sort",
    "counting-sort",
    "merge-sort",
    "bucket-sort",
    "inversions",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
sortkit = "sortkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sortkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
