[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hmycli"
version = "0.1.0"
description = "Harmony blockchain helpers: addresses, chain ids, fixed-point amounts, staking input checks and a small offline CLI"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["harmony", "blockchain", "bech32", "staking", "chain-id", "cli"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hmy = "hmycli.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hmycli"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
