[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "genco"
version = "0.1.0"
description = "Building blocks for generating and inspecting Java source code: node kinds, indentation, imports and data types."
requires-python = ">=3.10"
dependencies = []
keywords = ["java", "code-generation", "imports", "source-code"]
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
    "Topic :: Software Development :: Code Generators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["genco"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
