[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "jsonrest"
version = "1.2.0"
description = "A lenient JSON document tree, a small REST dispatch engine and pure-Python hashing utilities"
requires-python = ">=3.10"
dependencies = []
keywords = ["json", "rest", "swagger", "routing", "md5", "sha1", "sha256", "base64", "ring buffer"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["jsonrest"]

[tool.pytest.ini_options]
addopts = "-ra"
