[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "enginetry"
version = "0.1.0"
description = "A small software-rendered game frame update, classic sorting routines and a stereo WAVE loader"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "software-rendering", "sorting", "wave", "audio", "linked-list"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
enginetry-sort-demo = "enginetry.testing_ground:main"

[tool.hatch.build.targets.wheel]
packages = ["enginetry"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
