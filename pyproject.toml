[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pathtracer"
version = "0.1.0"
description = "A small path tracer that renders spheres, triangles and cuboids described in INI files to BMP images"
requires-python = ">=3.10"
dependencies = []
keywords = ["raytracer", "path tracing", "rendering", "bmp", "3d", "graphics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pathtracer = "pathtracer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pathtracer"]

[tool.hatch.build.targets.sdist]
include = ["pathtracer", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
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
