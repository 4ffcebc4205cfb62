[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "datetag"
version = "0.3.1"
description = "Generate and manage date tags such as 20240427, TEST_202404 or 2024-04-03_rel"
requires-python = ">=3.10"
dependencies = []
keywords = ["cli", "date", "tag"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
datetag = "datetag.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["datetag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
