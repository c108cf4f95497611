[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jedmp"
version = "0.1.0"
description = "A small desktop music player with a cached library and a play queue"
requires-python = ">=3.10"
keywords = ["music", "player", "audio", "play queue", "library", "id3", "flac"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
jedmp = "jedmp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["jedmp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
