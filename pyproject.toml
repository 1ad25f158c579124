[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "otfont"
version = "0.1.0"
description = "Reading, manipulating and writing OpenType font tables: head, hhea, hmtx and GSUB/GPOS layout subtables"
requires-python = ">=3.10"
dependencies = []
keywords = ["opentype", "truetype", "font", "hmtx", "gsub", "gpos", "typography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Fonts",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["otfont"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
