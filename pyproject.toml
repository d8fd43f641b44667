[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maec"
version = "0.1.0"
description = "Modular audio engine components: module chains, oscillators, envelopes, filters and DSP helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "synthesis", "dsp", "oscillator", "envelope", "filter"]
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
    "Topic :: Multimedia :: Sound/Audio :: Sound Synthesis",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["maec"]

[tool.pytest.ini_options]
addopts = "-ra"
