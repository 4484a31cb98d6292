[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hostprobe"
version = "0.1.0"
description = "Read endpoint state as rows: files, processes, sockets, users, journal records and host details"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["monitoring", "endpoint", "processes", "sockets", "files", "journal", "inventory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["hostprobe"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
