[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msdfkit"
version = "1.0.0"
description = "Building blocks for multi-channel signed distance fields: 2D geometry types, float bitmaps, explicit edge colouring and text/binary output encoders."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "msdf",
    "sdf",
    "signed distance field",
    "bitmap",
    "edge coloring",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["msdfkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
