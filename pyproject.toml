[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "exerciser"
version = "4.7.0"
description = "Run, verify and watch small programming exercises and homework sets from the terminal"
requires-python = ">=3.11"
keywords = ["education", "exercises", "homework", "teaching", "watch", "verify"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Computer Aided Instruction (CAI)",
]
dependencies = [
    "rich",
    "watchdog",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
exerciser = "exerciser.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["exerciser"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
