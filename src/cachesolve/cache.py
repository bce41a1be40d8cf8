from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

import numpy as np

from cachesolve.solver import solve_inverse

if TYPE_CHECKING:
    import numpy.typing as npt

    from cachesolve.cell import CacheCell

logger = logging.getLogger(__name__)


def cached_inverse_of(
    cell: CacheCell,
    *args: Any,
    solver: Callable[..., npt.NDArray[np.float64]] = solve_inverse,
    **kwargs: Any,
) -> npt.NDArray[np.float64]:
    """
    Return the inverse of the cell's source matrix, computing it at most once.

    On a hit the stored array is returned as is; the source is not read. On a
    miss the source is passed to `solver` together with `args` and `kwargs`
    (unchanged, in order), the result is stored in the cell and returned.

    Args:
        cell: The cell holding the source matrix and the cache slot.
        *args: Extra positional options for the solver.
        solver: The linear-solve primitive. Not forwarded to itself.
        **kwargs: Extra keyword options for the solver.

    Raises:
        Whatever `solver` raises, unchanged. The cell is left without an inverse.

    Returns:
        The (possibly cached) inverse matrix.
    """
    inverse = cell.get_cached_inverse()
    if inverse is not None:
        logger.debug("Returning cached inverse.")
        return inverse

    matrix = cell.get_source()
    logger.debug(f"Cache miss, solving matrix of shape {np.shape(matrix)}.")
    inverse = solver(matrix, *args, **kwargs)
    cell.set_cached_inverse(inverse)
    return inverse
