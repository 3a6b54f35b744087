[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "layermux"
version = "0.1.0"
description = "A layered HTTP request multiplexer with middleware chains, path parameters and priorities"
requires-python = ">=3.10"
keywords = ["http", "router", "mux", "middleware", "layers"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Internet :: WWW/HTTP",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
layermux-example = "layermux.example:main"

[tool.hatch.build.targets.wheel]
packages = ["layermux"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
