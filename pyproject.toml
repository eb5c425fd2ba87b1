[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chateau"
version = "0.1.0"
description = "Bitboard chess board representation, FEN loading, attack sets and check analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "fen", "attacks", "kogge-stone"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["chateau"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
