[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridglide"
version = "0.1.0"
description = "Front-end logic for a grid-based text editor: cursor and window animation, settings, and keyboard and mouse translation"
requires-python = ">=3.10"
dependencies = []
keywords = ["editor", "grid", "cursor", "animation", "easing", "keyboard", "mouse", "settings"]
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
    "Topic :: Text Editors",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridglide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
