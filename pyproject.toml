[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minilex"
version = "0.1.0"
description = "Shell command-line lexing: variable expansion, tokenizing and syntax checks, with small string helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["shell", "tokenizer", "lexer", "expansion", "parsing"]
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
    "Topic :: System :: Shells",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["minilex"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
