[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cryptohacks"
version = "0.1.0"
description = "Convert text to and from hex, 7-bit binary, Base64 and Base32, and apply a running Caesar shift"
requires-python = ">=3.10"
dependencies = []
keywords = ["hex", "binary", "base64", "base32", "caesar", "cipher", "encoding"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cryptohacks = "cryptohacks.app:main"

[tool.hatch.build.targets.wheel]
packages = ["cryptohacks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
