[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "homeworkkit"
version = "0.1.0"
description = "Small console exercises: Kirchhoff's laws, ASCII shapes, a boss fight and a seven-segment display"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "exercises", "kirchhoff", "ascii-art", "seven-segment"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
homeworkkit-circuits = "homeworkkit.circuits:main"
homeworkkit-shapes = "homeworkkit.shapes:main"
homeworkkit-boss-fight = "homeworkkit.boss_fight:main"
homeworkkit-segment-display = "homeworkkit.segment_display:main"

[tool.hatch.build.targets.wheel]
packages = ["homeworkkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
