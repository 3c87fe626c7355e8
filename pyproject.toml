[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tableorders"
version = "0.1.0"
description = "Restaurant table order book driven by a line-oriented command stream"
requires-python = ">=3.10"
dependencies = []
keywords = ["restaurant", "orders", "point-of-sale", "billing"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
tableorders = "tableorders.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tableorders"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
