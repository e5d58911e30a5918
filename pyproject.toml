[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pheasant"
version = "0.1.0"
description = "A small asynchronous HTTP server that routes requests to registered services"
requires-python = ">=3.10"
dependencies = []
keywords = ["http", "server", "asyncio", "web", "routing"]
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
    "Framework :: AsyncIO",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
pheasant-dev = "pheasant.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pheasant"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
