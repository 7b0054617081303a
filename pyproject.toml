[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dmrlink"
version = "20260214"
description = "Building blocks for DMR network gateways: sync patterns, timers, SHA-256, ring buffers and UDP sockets"
requires-python = ">=3.10"
dependencies = []
keywords = ["dmr", "ham radio", "amateur radio", "gateway", "udp", "sha256"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Telecommunications Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications :: Ham Radio",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dmrlink"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
