[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glcube"
version = "0.1.0"
description = "Small 3D scene toolkit: 4x4 matrix math, a fly-through camera, mesh data, shader uniforms and a frame loop"
requires-python = ">=3.10"
dependencies = []
keywords = ["3d", "matrix", "camera", "mesh", "quaternion", "projection"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
glcube = "glcube.render:main"

[tool.hatch.build.targets.wheel]
packages = ["glcube"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
