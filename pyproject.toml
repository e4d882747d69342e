[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tomatochess"
version = "0.1.0"
description = "Bitboard primitives for chess: square sets, directions, colours, castling rights and magic sliding-piece attack tables."
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "bitboard", "magic bitboards", "attack tables"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["tomatochess"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
