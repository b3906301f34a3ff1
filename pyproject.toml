[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pipeline-runner"
version = "0.1.0"
description = "Run a chain of commands between an input file and an output file, with here-document support"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "pipe", "shell", "heredoc", "subprocess"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Shells",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pipeline-runner = "pipeline_runner.pipeline:main"

[tool.hatch.build.targets.wheel]
packages = ["pipeline_runner"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
