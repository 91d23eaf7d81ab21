[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "interntasks"
version = "0.1.0"
description = "Small utilities: text-file modes, run-length encoding, infix expression evaluation and a snake game"
requires-python = ">=3.10"
keywords = ["rle", "run-length encoding", "postfix", "infix", "snake", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
interntasks-textfile = "interntasks.textfile:main"
interntasks-rle = "interntasks.rle:main"
interntasks-expr = "interntasks.expression:main"
interntasks-snake = "interntasks.snake:main"

[tool.hatch.build.targets.wheel]
packages = ["interntasks"]

[tool.pytest.ini_options]
addopts = "-ra"
