"""
Cache Cell (Data Model)
=======================
This module defines the state container behind the cached inverse.

Why is this file needed?
------------------------
1. State Management: It binds one source matrix to at most one computed
   inverse.
2. Consistency: Replacing the source always clears the cached inverse, so the
   two fields never go out of sync.

Classes:
    CacheCell: Source matrix plus optional cached inverse.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class CacheCell:
    """
    Single-slot memo for the inverse of one logical matrix.

    The source matrix is stored as given, not copied. Mutating it in place
    without calling `reset_source` leaves a stale inverse in the cell.
    """

    def __init__(
        self,
        source: Optional[npt.ArrayLike] = None,
    ) -> None:
        """
        Initialize the cell with a source matrix and an empty cache.

        No validation of the matrix is performed here; a non-square or singular
        source is only reported by the solver when the inverse is requested.

        Args:
            source: The matrix to be inverted. Defaults to an empty 0x0 matrix.
        """
        if source is None:
            source = np.empty((0, 0), dtype=np.float64)

        self._source = source
        self._cached_inverse: Optional[npt.NDArray[np.float64]] = None

    def __repr__(self) -> str:
        """String representation of the cell."""
        return (
            f"{self.__class__.__name__}(shape={np.shape(self._source)}, "
            f"cached={self.has_cached_inverse})"
        )

    @property
    def has_cached_inverse(self) -> bool:
        """Whether an inverse is currently stored."""
        return self._cached_inverse is not None

    def reset_source(self, new_matrix: npt.ArrayLike) -> None:
        """Replace the source matrix and drop the cached inverse."""
        self._source = new_matrix
        self._cached_inverse = None
        logger.debug(f"Source reset to shape {np.shape(new_matrix)}, cache cleared.")

    def get_source(self) -> npt.ArrayLike:
        """Return the current source matrix."""
        return self._source

    def set_cached_inverse(self, matrix: npt.NDArray[np.float64]) -> None:
        """Store `matrix` as the inverse, overwriting any previous value."""
        self._cached_inverse = matrix

    def get_cached_inverse(self) -> Optional[npt.NDArray[np.float64]]:
        """Return the cached inverse, or None when nothing is cached."""
        return self._cached_inverse
