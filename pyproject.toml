[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "solvalcalc"
version = "0.1.0"
description = "SOL value calculators for liquid staking tokens: LST/SOL conversion, calculator account suffixes and program-derived addresses"
requires-python = ">=3.10"
dependencies = []
keywords = ["solana", "liquid-staking", "lst", "pda", "stake-pool", "base58"]
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
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["solvalcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
