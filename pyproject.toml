[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fixedmap"
version = "0.1.0"
description = "A small immutable lookup map with unique keys, checked at construction."
requires-python = ">=3.10"
dependencies = []
keywords = ["map", "lookup", "immutable", "table", "mapping"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fixedmap-demo = "fixedmap.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["fixedmap"]

[tool.pytest.ini_options]
addopts = "-ra"
