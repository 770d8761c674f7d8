[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pengiriman"
version = "1.0.0"
description = "Shipping desk helper: delivery-time estimates between cities, shipment history lookup and bar-chart layout"
requires-python = ">=3.10"
dependencies = []
keywords = ["shipping", "delivery", "tracking", "estimate", "logistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pengiriman = "pengiriman.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["pengiriman"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
