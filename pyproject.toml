[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "glsandbox"
version = "0.1.0"
description = "Building blocks for small OpenGL rendering scenes: meshes, shapes, lights, a fly-through camera, shaders, textures and a scene stack."
requires-python = ">=3.10"
keywords = ["opengl", "rendering", "graphics", "lighting", "shaders", "camera", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Education",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["glsandbox"]

[tool.hatch.build.targets.sdist]
include = ["glsandbox", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
warn_unused_ignores = true
