[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cipherplay"
version = "0.1.0"
description = "Toy block and public-key ciphers for learning: DES, a mini Feistel cipher, ECB/CBC modes, RSA and ElGamal"
requires-python = ">=3.10"
dependencies = []
keywords = ["cryptography", "des", "feistel", "rsa", "elgamal", "education"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cipherplay = "cipherplay.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cipherplay"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
