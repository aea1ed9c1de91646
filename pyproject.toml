[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vago"
version = "0.1.0"
description = "Everyday helpers for lists and dicts, a null-aware decimal type and a small structured logger."
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "functional", "decimal", "logging", "collections"]
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

[tool.hatch.build.targets.wheel]
packages = ["vago"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
