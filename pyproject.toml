[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skelgraph"
version = "0.1.0"
description = "Skeleton diagram data, voxel neighbourhood topology checks and A* planning over sparse skeleton graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["skeleton", "voronoi", "gvd", "voxel", "graph", "path planning", "a-star"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skelgraph"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
