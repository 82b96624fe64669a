[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kickfilter"
version = "0.1.0"
description = "State-variable audio filters, a stereo block processor driven by knob readings, and a processing benchmark"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "dsp", "filter", "svf", "lowpass", "bell", "peaking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Sound/Audio",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kickfilter-bench = "kickfilter.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["kickfilter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
