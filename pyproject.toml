[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rarl"
version = "0.1.0"
description = "Render frame-by-frame 2D animations to video through ffmpeg"
requires-python = ">=3.10"
keywords = ["animation", "video", "ffmpeg", "rendering", "easing", "typst"]
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
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow>=10.1",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rarl = "rarl.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rarl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
