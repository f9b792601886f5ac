[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ykit"
version = "0.1.0"
description = "Small utility toolkit: ASCII character tests, sign and clamp, 2D vectors, C-style string helpers, buffered line reading, printf-style formatting and a list with reject helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["utilities", "printf", "vectors", "strings", "line-reader", "atoi"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ykit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
