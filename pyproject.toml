[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mkproj"
version = "0.1.0"
description = "Scaffold new projects from a small line-oriented configuration language"
requires-python = ">=3.10"
dependencies = []
keywords = ["scaffolding", "project-generator", "templates", "interpreter", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mkproj = "mkproj.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mkproj"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
