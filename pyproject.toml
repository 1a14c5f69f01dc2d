[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hbtemplate"
version = "0.1.0"
description = "Building blocks of a Handlebars-style template engine: errors, JSON values, paths, block scopes, context navigation, comparison helpers and case conversion."
requires-python = ">=3.10"
dependencies = []
keywords = ["handlebars", "templating", "template", "json", "mustache"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hbtemplate"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
