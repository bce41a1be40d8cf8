from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional

import numpy as np
import scipy as sp

if TYPE_CHECKING:
    import numpy.typing as npt


def solve_inverse(
    matrix: npt.ArrayLike,
    b: Optional[npt.ArrayLike] = None,
    **options: Any,
) -> npt.NDArray[np.float64]:
    """
    Solve the linear system `matrix @ x = b` with scipy.linalg.solve.

    When `b` is omitted the right-hand side is the identity, so the result is
    the inverse of `matrix`.

    Args:
        matrix: Square coefficient matrix.
        b: Optional right-hand side. Defaults to the identity of matching size.
        **options: Passed to scipy.linalg.solve unchanged
            (e.g. assume_a, check_finite, overwrite_a).

    Raises:
        ValueError: If `matrix` is not a square two-dimensional array.
        numpy.linalg.LinAlgError: If `matrix` is singular.

    Returns:
        The solution `x`; the inverse of `matrix` when `b` is None.
    """
    a = np.asarray(matrix)
    if a.ndim != 2 or a.shape[0] != a.shape[1]:
        raise ValueError(f"Expected a square two-dimensional matrix, got shape {a.shape}.")

    if b is None:
        b = np.eye(a.shape[0], dtype=np.result_type(a.dtype, np.float64))

    return sp.linalg.solve(a, b, **options)
