[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tankfield"
version = "0.1.0"
description = "Building blocks for a top-down tank arcade game, with a sprite-sheet tile viewer and a websocket game server"
requires-python = ">=3.10"
keywords = ["game", "arcade", "tanks", "pygame", "sprites", "websocket"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
    "aiohttp",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
]

[project.scripts]
tankfield-tiles = "tankfield.tileviewer:main"
tankfield-server = "tankfield.server:main"

[tool.hatch.build.targets.wheel]
packages = ["tankfield"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
