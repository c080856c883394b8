[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "inertialbuf"
version = "0.1.0"
description = "Circular buffer of multi-sensor inertial measurements (yaw, pitch, roll velocity and acceleration)"
requires-python = ">=3.10"
dependencies = []
keywords = ["inertial", "imu", "sensor", "circular-buffer", "measurement"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Interface Engine/Protocol Translator",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
inertialbuf-demo = "inertialbuf.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["inertialbuf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
