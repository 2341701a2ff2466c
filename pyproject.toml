[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webporto"
version = "0.1.0"
description = "Core building blocks for a portfolio and blog content backend: models, validation, business rules, auth tokens, pagination, logging and live view counts."
requires-python = ">=3.10"
keywords = ["cms", "portfolio", "blog", "jwt", "pagination", "validation"]
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
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Content Management System",
]
dependencies = [
    "pyjwt>=2.8",
    "bcrypt>=4.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
]

[tool.hatch.build.targets.wheel]
packages = ["webporto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
