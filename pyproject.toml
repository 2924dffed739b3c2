[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "verkle_crypto"
version = "0.1.0"
description = "Banderwagon group arithmetic, multi-scalar multiplication and commitment helpers for Verkle tries"
requires-python = ">=3.10"
dependencies = []
keywords = ["verkle", "banderwagon", "bandersnatch", "elliptic-curve", "commitment", "cryptography"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["verkle_crypto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
