[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aesbmp"
version = "0.1.0"
description = "Encrypt and decrypt the pixel data of BMP images with AES in ECB, CBC, CFB, OFB and CTR modes"
requires-python = ">=3.10"
keywords = [
    "aes",
    "bmp",
    "block cipher",
    "modes of operation",
    "pkcs7",
    "ecb",
    "cbc",
    "cfb",
    "ofb",
    "ctr",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Multimedia :: Graphics",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
aesbmp = "aesbmp.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aesbmp"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
