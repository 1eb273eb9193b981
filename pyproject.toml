[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lobook"
version = "1.0.0"
description = "A limit order book with price-time priority, bounded FIFO queues and a concurrent list"
requires-python = ">=3.10"
dependencies = [
    "sortedcontainers",
]
keywords = ["order book", "limit order", "trading", "fifo", "queue", "benchmark"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
lobook-demo = "lobook.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["lobook"]

[tool.pytest.ini_options]
addopts = "-ra"
