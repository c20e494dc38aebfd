[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "catchy"
version = "0.1.0"
description = "Comparison helpers for tests that explain why two values differ"
requires-python = ">=3.10"
dependencies = []
keywords = ["testing", "assertions", "approx", "diff", "comparison"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Testing",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["catchy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
