[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "printlib"
version = "0.1.0"
description = "Write text to a stream or file, with a small command that appends words to a log file"
requires-python = ">=3.10"
dependencies = []
keywords = ["print", "text", "stream", "log"]
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
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
printlib-demo = "printlib.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["printlib"]

[tool.pytest.ini_options]
addopts = "-ra"
