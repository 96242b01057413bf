[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "therum"
version = "0.1.0"
description = "A small hybrid synthesizer engine: wavetable voices, filters, modulation, presets and plugin-style state"
requires-python = ">=3.10"
dependencies = []
keywords = ["synthesizer", "wavetable", "audio", "dsp", "envelope", "lfo", "presets"]
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
packages = ["therum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
