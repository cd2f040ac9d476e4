[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ndprojects"
version = "0.1.0"
description = "Small programs in one package: OpenStreetMap A* route planner, graph chatbot, snake game logic and process helpers"
requires-python = ">=3.10"
keywords = [
    "route-planning",
    "a-star",
    "openstreetmap",
    "chatbot",
    "levenshtein",
    "snake",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ndp-route-planner = "ndprojects.routeplanner.cli:main"
ndp-chatbot = "ndprojects.chatbot.chatlogic:main"

[tool.hatch.build.targets.wheel]
packages = ["ndprojects"]

[tool.hatch.build.targets.sdist]
include = ["ndprojects", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
