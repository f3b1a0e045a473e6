[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mediabox"
version = "0.1.0"
description = "Box readers for the ISO base media file format (MP4, HEIF)"
requires-python = ">=3.10"
dependencies = []
keywords = ["isobmff", "mp4", "heif", "heic", "quicktime", "box"]
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
    "Topic :: Multimedia :: Video",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mediabox"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
