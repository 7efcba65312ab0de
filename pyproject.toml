[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "abyss"
version = "0.1.0"
description = "Core building blocks of a small application engine: events, logging, resources, serialization, vertex layouts, plus localization and watchdog tools"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["engine", "events", "logging", "serialization", "vertex", "localization", "watchdog"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
abyss-localize = "abyss.localize:main"
abyss-watchdog = "abyss.watchdog:main"

[tool.hatch.build.targets.wheel]
packages = ["abyss"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
