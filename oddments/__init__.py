"""Small command-line tools: triangle solvers, sudoku, primes, seven-segment digits, pad crypt, dumbsort, memhog, log benchmarks, a restarter and mastermind."""

__version__ = "1.0.0"