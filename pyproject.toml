[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "speciesnet"
version = "0.1.0"
description = "Image loading, letterboxing, non-max suppression and detection types for camera-trap detector models"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["camera trap", "wildlife", "object detection", "yolo", "non-max suppression", "megadetector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["speciesnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
