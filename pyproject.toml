[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "finderbot"
version = "0.1.0"
description = "Grid path planning, an in-memory display and a fake sysfs tree for an EV3 robot"
requires-python = ">=3.10"
dependencies = []
keywords = ["ev3", "robotics", "pathfinding", "a-star", "sysfs", "framebuffer"]
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
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["finderbot"]

[tool.pytest.ini_options]
addopts = "-ra"
