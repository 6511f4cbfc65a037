[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "postboard"
version = "0.1.0"
description = "A small layered JSON web service for storing and listing posts in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "rest", "json", "sqlite", "posts", "layered-architecture"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Web Environment",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
postboard = "postboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["postboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
