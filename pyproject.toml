[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "croptrack"
version = "0.1.0"
description = "IoU-based multi-object tracker for per-frame detections, with optional PNG rendering of each frame"
requires-python = ">=3.10"
keywords = ["tracking", "object-tracking", "iou", "detection", "agriculture"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Recognition",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
croptrack = "croptrack.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["croptrack"]

[tool.pytest.ini_options]
addopts = "-ra"
