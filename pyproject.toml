[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spimem"
version = "0.1.0"
description = "Asyncio driver for 25-series SPI flash and EEPROM chips over an abstract SPI device"
requires-python = ">=3.10"
dependencies = []
keywords = ["serial", "flash", "eeprom", "spi", "async", "embedded"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Framework :: AsyncIO",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
]

[project.optional-dependencies]
test = ["pytest", "pytest-asyncio"]

[tool.hatch.build.targets.wheel]
packages = ["spimem"]

[tool.pytest.ini_options]
addopts = "-ra"
