[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exercisekit"
version = "0.1.0"
description = "Classic data-structure and algorithm exercises with a grader that builds, tests and scores exercise projects"
requires-python = ">=3.10"
dependencies = []
keywords = ["exercises", "algorithms", "data structures", "grader", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
exercisekit-grade = "exercisekit.grader:main"

[tool.hatch.build.targets.wheel]
packages = ["exercisekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
