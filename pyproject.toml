[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tsbind"
version = "0.1.0"
description = "Generate TypeScript type declarations from struct and enum descriptions, with imports across exported files"
requires-python = ">=3.11"
dependencies = []
keywords = ["typescript", "bindings", "code generation", "types", "interface", "declarations"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tsbind"]

[tool.hatch.build.targets.sdist]
include = ["tsbind", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.11"
warn_unused_ignores = true
warn_redundant_casts = true
