[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "riotclient"
version = "0.1.0"
description = "A small HTTP client for the Riot Games API with pluggable request middleware"
requires-python = ">=3.10"
dependencies = [
    "httpx",
]
keywords = ["riot", "riot-games", "api", "client", "http", "middleware"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
    "Topic :: Internet :: WWW/HTTP",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
riotclient = "riotclient.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["riotclient"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
