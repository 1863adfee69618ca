[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysdemos"
version = "0.1.0"
description = "Small runnable demonstrations of sorting, data structures, threads, processes, signals, timers, progress output and sockets"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "sorting",
    "linked-list",
    "stack",
    "queue",
    "threads",
    "processes",
    "signals",
    "timers",
    "sockets",
    "demos",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sysdemos-sorting = "sysdemos.sorting:main"
sysdemos-partition = "sysdemos.partition:main"
sysdemos-linked-list = "sysdemos.linked_list:main"
sysdemos-stack = "sysdemos.stack:main"
sysdemos-fifo = "sysdemos.fifo:main"
sysdemos-callbacks = "sysdemos.callbacks:main"
sysdemos-threads = "sysdemos.threads:main"
sysdemos-oddeven = "sysdemos.oddeven:main"
sysdemos-processes = "sysdemos.processes:main"
sysdemos-signals = "sysdemos.signals:main"
sysdemos-timers = "sysdemos.timers:main"
sysdemos-progress = "sysdemos.progress:main"
sysdemos-tcp = "sysdemos.tcp:main"

[tool.hatch.build.targets.wheel]
packages = ["sysdemos"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
