[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chonk"
version = "0.1.0"
description = "A small voxel chunk renderer with a texture atlas and a free-flying camera"
requires-python = ">=3.10"
keywords = ["voxel", "opengl", "chunk", "mesh", "camera", "renderer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
chonk = "chonk.app:main"

[tool.hatch.build.targets.wheel]
packages = ["chonk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
