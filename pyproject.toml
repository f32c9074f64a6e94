[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "schnitzel"
version = "0.1.0"
description = "Core helpers for a small 2D sprite game engine: vector math, fixed arrays, bump allocation, file I/O, WAV headers, sprite atlas data, shader types and input state."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "2d", "sprites", "input", "wav"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["schnitzel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
