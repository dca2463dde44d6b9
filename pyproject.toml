[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ddsmonitor"
version = "0.1.0"
description = "Statistics series, chart boxes and tree models for monitoring DDS networks"
requires-python = ">=3.10"
dependencies = []
keywords = ["dds", "monitoring", "statistics", "charts", "time series"]
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
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ddsmonitor"]

[tool.pytest.ini_options]
addopts = "-ra"
