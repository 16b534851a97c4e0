[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "architects"
version = "1.0.0"
description = "Dots-and-boxes board game for the terminal, with computer opponents, user accounts and round avatars"
requires-python = ">=3.10"
keywords = ["game", "board-game", "dots-and-boxes", "ai", "terminal", "avatar"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
architects = "architects.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["architects"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
