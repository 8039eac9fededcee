[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sentinelscan"
version = "0.1.0"
description = "A small file scanner: SHA-256 signature matching, entropy heuristics, quarantine and simple system monitors."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "antivirus",
    "malware",
    "scanner",
    "sha256",
    "entropy",
    "quarantine",
    "monitoring",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sentinelscan = "sentinelscan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["sentinelscan"]

[tool.hatch.build.targets.sdist]
include = ["sentinelscan", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
