[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "revflag"
version = "0.1.0"
description = "Render three-stripe flags from a colour palette and save them as PNG images"
requires-python = ">=3.10"
keywords = ["flag", "tricolour", "palette", "image", "png"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
revflag = "revflag.flag:main"

[tool.hatch.build.targets.wheel]
packages = ["revflag"]

[tool.pytest.ini_options]
addopts = "-ra"
