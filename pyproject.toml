[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "studentdesk"
version = "0.1.0"
description = "Interactive console student register and a simulated pressure-alarm controller"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "console", "menu", "state-machine", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
studentdesk = "studentdesk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["studentdesk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
