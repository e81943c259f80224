[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "picospectrum"
version = "0.1.0"
description = "Audio frequency detector: FFT peak finder, spectrum view and chromatic tuner for a 128x64 monochrome display"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "fft",
    "spectrum",
    "tuner",
    "audio",
    "ssd1306",
    "oled",
    "frequency",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["picospectrum"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
