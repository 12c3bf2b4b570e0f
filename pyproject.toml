[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ecscli"
version = "0.3.0"
description = "Configuration, caching and compose-file helpers for a container cluster command-line tool"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "containers", "compose", "cluster", "configuration", "cache"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ecscli-version-gen = "ecscli.version_gen:main"

[tool.hatch.build.targets.wheel]
packages = ["ecscli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
