[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginecore"
version = "0.1.0"
description = "Core game-engine building blocks: result codes, scope guards, 3D math, rigid bodies, GPU buffer layouts, platform helpers and a tick clock."
requires-python = ">=3.10"
dependencies = []
keywords = ["game engine", "3d math", "quaternion", "transform", "rigid body", "half float"]
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
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["enginecore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
