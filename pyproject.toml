[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lvhost"
version = "1.6.9"
description = "Building blocks for an LV2 plugin host: URI mapping, event buffers, workers and a realtime process model"
requires-python = ">=3.10"
dependencies = []
keywords = ["lv2", "audio", "plugin", "host", "urid", "midi"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lvhost"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
