[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bejewel"
version = "0.1.0"
description = "A match-three jewel puzzle engine with a console game and a headless board model"
requires-python = ">=3.10"
keywords = ["puzzle", "game", "match-three", "jewels", "console"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
bejewel = "bejewel.text_ui:main"
bejewel-gui = "bejewel.puzzle_window:main"

[tool.hatch.build.targets.wheel]
packages = ["bejewel"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
