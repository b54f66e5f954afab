[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trafficfsm"
version = "1.0.0"
description = "A traffic light finite-state machine with pedestrian requests, a console simulator and a crossroad view"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "finite-state-machine",
    "fsm",
    "traffic-light",
    "simulation",
    "state-pattern",
    "crossroad",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trafficfsm = "trafficfsm.cli:main"
trafficfsm-view = "trafficfsm.app:main"

[tool.hatch.build.targets.wheel]
packages = ["trafficfsm"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
