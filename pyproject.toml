[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ebisp"
version = "0.1.0"
description = "A small Lisp dialect with a reader, an evaluator, a standard library and an interactive REPL"
requires-python = ">=3.10"
dependencies = []
keywords = ["lisp", "interpreter", "repl", "s-expression", "scripting"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ebisp = "ebisp.repl:main"

[tool.hatch.build.targets.wheel]
packages = ["ebisp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
