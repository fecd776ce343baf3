[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "splitshot"
version = "0.1.0"
description = "A split-screen wireframe arena shooter and a simple background image viewer built on pygame"
requires-python = ">=3.10"
keywords = ["game", "shooter", "split-screen", "pygame", "wireframe"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
splitshot = "splitshot.render:main"
splitshot-viewer = "splitshot.viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["splitshot"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
