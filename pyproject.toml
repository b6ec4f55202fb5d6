[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edsig"
version = "0.1.0"
description = "Ed25519 key generation, signing and verification in pure Python"
requires-python = ">=3.10"
dependencies = []
keywords = ["ed25519", "signature", "eddsa", "cryptography", "curve25519"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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
test = ["pytest", "hypothesis"]

[project.scripts]
edsig-keygen = "edsig.cli:keygen_main"
edsig-sign = "edsig.cli:sign_main"
edsig-verify = "edsig.cli:verify_main"

[tool.hatch.build.targets.wheel]
packages = ["edsig"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
