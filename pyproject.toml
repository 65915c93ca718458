[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xnakit"
version = "0.1.0"
description = "Game framework primitives: time spans, geometry, packed colors, memory streams, graphics state descriptions and a game model."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "framework", "color", "timespan", "stream", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["xnakit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
