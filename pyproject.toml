[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phantom"
version = "0.1.0"
description = "Scene graph, scene objects, camera and support utilities for a small 3D rendering engine"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["3d", "scene-graph", "rendering", "camera", "skinning", "game-engine"]
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
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["phantom"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
