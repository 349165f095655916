[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aissock"
version = "0.1.0"
description = "Object-oriented socket wrappers with string masking and tokenising helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["socket", "networking", "ipv4", "ipv6", "unix-socket", "ipx", "wildcard", "tokenizer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["aissock"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
