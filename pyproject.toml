[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reisebuero"
version = "0.1.0"
description = "Manage travel agency bookings (flights, hotels, rental cars, train tickets) grouped into travels and customers, stored as JSON"
requires-python = ">=3.10"
dependencies = []
keywords = ["travel", "booking", "agency", "hotel", "flight", "train", "rental car", "json"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: German",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
reisebuero = "reisebuero.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["reisebuero"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
