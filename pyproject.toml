[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quizbuild"
version = "0.1.0"
description = "Check quiz questions against a compiler and build the quiz website data"
requires-python = ">=3.10"
keywords = ["quiz", "education", "static-site", "rustc"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education :: Testing",
]
dependencies = [
    "markdown-it-py",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quizbuild = "quizbuild.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["quizbuild"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
