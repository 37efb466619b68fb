[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ever"
version = "1.0.0"
description = "Simple train ticket sales system with a text menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["train", "ticket", "timetable", "sales", "point-of-sale"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Hungarian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ever = "ever.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["ever"]

[tool.pytest.ini_options]
addopts = "-ra"
