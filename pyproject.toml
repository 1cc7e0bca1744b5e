[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reprise"
version = "0.1.5"
description = "Formatting of Bitrise apps, builds, pipelines and artifacts for terminal and JSON output, with desktop notifications"
requires-python = ">=3.10"
dependencies = []
keywords = ["bitrise", "ci", "builds", "devops", "formatting"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Build Tools",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["reprise"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
