"""
Cached Matrix Inverse
=====================
Computes the inverse of a matrix once and serves it from a cache afterwards.

Note: This package is pure Python/NumPy/SciPy and never configures logging on
import. Call `setup_logging` from the application if log output is wanted.
"""
from cachesolve.cache import cached_inverse_of
from cachesolve.cell import CacheCell
from cachesolve.logging_config import setup_logging
from cachesolve.solver import solve_inverse

__all__ = [
    "CacheCell",
    "cached_inverse_of",
    "setup_logging",
    "solve_inverse",
]
