[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "b3dgame"
version = "0.1.0"
description = "Headless first-person movement sandbox: walking, sliding, ground slams, screen shake and food pickups on a grid map"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "first-person", "simulation", "movement", "camera", "headless"]
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
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
b3dgame = "b3dgame.app:main"

[tool.hatch.build.targets.wheel]
packages = ["b3dgame"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
