[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "myhunter"
version = "0.1.0"
description = "A small duck-shooting arcade game: click the flying duck before it leaves the screen."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "duck", "hunter", "pygame", "printf"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
my_hunter = "myhunter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["myhunter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
