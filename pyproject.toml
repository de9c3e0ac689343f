[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bidwallet"
version = "0.1.0"
description = "Wallet domain model for an auction marketplace: balances, holds, escrow, validation and payment helpers"
requires-python = ">=3.11"
dependencies = []
keywords = ["wallet", "auction", "escrow", "payments", "ledger"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bidwallet"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py311"

[tool.mypy]
python_version = "3.11"
