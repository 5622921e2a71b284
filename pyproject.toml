[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "oddments"
version = "1.0.0"
description = "A drawer of small command-line tools: triangle solvers, a sudoku solver, a prime finder, seven-segment digits, a one-time-pad file crypter, mastermind and a few benchmarks."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "triangle",
    "trigonometry",
    "sudoku",
    "primes",
    "seven-segment",
    "one-time-pad",
    "mastermind",
    "benchmark",
    "watchdog",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
triangle = "oddments.triangle_cli:main"
triangle-legacy = "oddments.triangle_legacy_cli:main"
sudoku = "oddments.sudoku:main"
prime = "oddments.primes:main"
lprime = "oddments.primes:main_long"
tonum = "oddments.digits:main"
padcrypt = "oddments.padcrypt:main"
dumbsort = "oddments.dumbsort:main"
memhog = "oddments.memhog:main"
logbench-fwrite = "oddments.logbench:main_fwrite"
logbench-mmap = "oddments.logbench:main_mmap"
procrestart = "oddments.procrestart:main"
mastermind = "oddments.mastermind:main"

[tool.setuptools.packages.find]
include = ["oddments", "oddments.*"]

[tool.pytest.ini_options]
addopts = "-ra"
