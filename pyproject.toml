[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "driveshare"
version = "0.1.0"
description = "Car sharing core: car listings, bookings, chat messages, login session and page navigation, stored in SQLite"
requires-python = ">=3.10"
dependencies = []
keywords = ["car sharing", "rental", "booking", "sqlite", "marketplace"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["driveshare"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
