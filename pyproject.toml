[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "acmacros"
version = "0.1.0"
description = "Catalog of autoconf, autotest, m4sh and m4sugar macros with the kinds of their arguments and expansions."
requires-python = ">=3.10"
dependencies = []
keywords = ["autoconf", "m4", "m4sugar", "configure", "macros"]
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
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["acmacros"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
