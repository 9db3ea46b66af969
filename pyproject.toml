[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ticklekit"
version = "0.1.0"
description = "Emulator front-end building blocks: byte streams, pixel surfaces, bitmap fonts, audio sinks, profiling and controller-driven menu screens"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "surface", "bmp", "wav", "font", "profiler", "menu"]
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
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ticklekit"]

[tool.pytest.ini_options]
addopts = "-ra"
