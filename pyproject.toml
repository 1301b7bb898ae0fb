[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuvfade"
version = "0.1.0"
description = "BT.601 YUV 4:2:0 to RGB conversion, alpha fading and two-frame blending of raw video frames"
requires-python = ">=3.10"
keywords = ["yuv", "yuv420", "rgb", "bt601", "fade", "blend", "color-conversion", "video"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Multimedia :: Video :: Conversion",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yuvfade = "yuvfade.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["yuvfade"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
