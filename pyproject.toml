[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fdfkit"
version = "0.1.0"
description = "C-style string, memory, list, line-reading and printf helpers, plus pixel, colour and render-queue utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "strings",
    "memory",
    "linked-list",
    "printf",
    "getline",
    "fnv-1a",
    "rgba",
    "render-queue",
]
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
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fdfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
