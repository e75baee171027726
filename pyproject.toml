[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "skeinhash"
version = "0.1.0"
description = "Pure Python Skein hash functions, Threefish block ciphers and a random-math program interpreter"
requires-python = ">=3.10"
dependencies = []
keywords = ["skein", "threefish", "hash", "mac", "cryptography", "cryptonight"]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["skeinhash"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
