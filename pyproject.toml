[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fusionslam"
version = "0.1.0"
description = "Configuration, lidar models and pose utilities for a lidar/IMU fusion SLAM front end"
requires-python = ">=3.10"
keywords = ["slam", "lidar", "imu", "sensor-fusion", "robotics", "point-cloud"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "numpy",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fusionslam = "fusionslam.node:main"

[tool.hatch.build.targets.wheel]
packages = ["fusionslam"]

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
ignore_missing_imports = true
