[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dayzlauncher"
version = "0.1.0"
description = "Mod list, configuration and launch-parameter handling for a DayZ launcher on Unix systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["dayz", "launcher", "mods", "workshop", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dayzlauncher"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
