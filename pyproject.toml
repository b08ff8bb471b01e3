[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pmcputemp"
version = "1.0.0"
description = "A small desktop CPU temperature monitor"
requires-python = ">=3.10"
keywords = ["cpu", "temperature", "monitor", "sensors", "lm_sensors"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
pmcputemp = "pmcputemp.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pmcputemp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
