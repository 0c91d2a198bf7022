[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptoutils"
version = "0.1.0"
description = "In-place and buffer-to-buffer views, opaque debug representations and Wycheproof test-vector conversion helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "buffers", "wycheproof", "test-vectors", "xor"]
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cryptoutils"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
