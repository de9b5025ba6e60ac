[build-system]
requires = ["hatchling>=1.18"]
build-backend = "hatchling.build"

[project]
name = "subsmanager"
version = "0.1.0"
description = "HTTP API for managing product subscriptions backed by MongoDB"
requires-python = ">=3.10"
keywords = ["subscriptions", "billing", "mongodb", "flask", "rest", "api"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    "Topic :: Database :: Front-Ends",
]
dependencies = [
    "pymongo>=4.0",
    "flask>=2.2",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
]

[project.scripts]
subsmanager = "subsmanager.app:main"

[tool.hatch.build.targets.wheel]
packages = ["subsmanager"]

[tool.hatch.build.targets.sdist]
include = ["subsmanager", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
target-version = "py310"
line-length = 100

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
ignore_missing_imports = true

[tool.coverage.run]
source = ["subsmanager"]
branch = true
