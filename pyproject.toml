[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "goalai"
version = "0.1.0"
description = "Goal-driven game AI: weighted combat action selection followed by utility-scored subgoals under a turn budget."
requires-python = ">=3.10"
dependencies = []
keywords = ["game-ai", "utility-ai", "state-machine", "npc", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["goalai"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
