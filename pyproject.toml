[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysprogkit"
version = "0.1.0"
description = "Small systems-programming toolkit: bounded readers, tee writers, binary decoding, PNG chunks, path helpers, cancellation contexts, asyncio queue patterns and tiny network tools."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "io",
    "streams",
    "png",
    "binary",
    "paths",
    "asyncio",
    "context",
    "sockets",
    "http",
    "udp",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
    "pytest-asyncio",
]

[project.scripts]
sysprogkit-png = "sysprogkit.pngcli:main"
sysprogkit-http = "sysprogkit.httpdemo:main"
sysprogkit-fs = "sysprogkit.fstools:main"

[tool.hatch.build.targets.wheel]
packages = ["sysprogkit"]

[tool.hatch.build.targets.sdist]
include = ["sysprogkit", "tests", "README.md", "pyproject.toml"]

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
