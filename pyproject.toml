[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "toolbench"
version = "0.1.0"
description = "Small utilities: HTML tree walking, bit-vector integer sets, an arithmetic expression language, topological sorting, surface plotting and more"
requires-python = ">=3.10"
dependencies = [
    "html5lib",
]
keywords = [
    "html",
    "crawler",
    "intset",
    "expression-parser",
    "topological-sort",
    "svg",
    "wsgi",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
toolbench-outline = "toolbench.htmlwalk:main"
toolbench-calc = "toolbench.calc:main"

[tool.hatch.build.targets.wheel]
packages = ["toolbench"]

[tool.hatch.build.targets.sdist]
include = [
    "toolbench",
    "tests",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
