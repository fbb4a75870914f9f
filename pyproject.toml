[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "workroster"
version = "0.1.0"
description = "A staff roster kept in a plain text file, with a menu-driven console, two small random demos and ordered-container helpers"
requires-python = ">=3.10"
keywords = ["roster", "staff", "employees", "console", "sorted-containers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]
dependencies = [
    "sortedcontainers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
workroster = "workroster.cli:main"
workroster-contest = "workroster.contest:main"
workroster-departments = "workroster.departments:main"

[tool.hatch.build.targets.wheel]
packages = ["workroster"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
