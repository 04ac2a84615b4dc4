"""
Uniform float64 access to the groups of caller-owned variables used by
the damped fixed-point iteration.  A group can be:

    - A NumPy array of any floating dtype and shape (walked in C order).
    - A mutable sequence of real numbers, e.g. a list.
    - A sequence of `Cell` objects.
"""
from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from numbers import Real

import numpy as np
from numpy.typing import NDArray

from pyrelax.core.cell import Cell
from pyrelax.solve.exception import ErrorKind, IterationError


# Last updated: October 2026.


# ======================================================================

def check_group(cells, idx: int):
    """
    Raise an ``INVALID_INPUT`` `IterationError` if `cells` (group
    number `idx`) cannot be read and written in place.
    """
    def _invalid(reason: str):
        return IterationError(ErrorKind.INVALID_INPUT,
                              f"Group {idx} {reason}.", group=idx)

    if isinstance(cells, np.ndarray):
        if not np.issubdtype(cells.dtype, np.floating):
            raise _invalid(f"array has non-floating dtype '{cells.dtype}'")
        if not cells.flags.writeable:
            raise _invalid("array is read-only")
        return

    if not isinstance(cells, Sequence) or isinstance(cells, (str, bytes)):
        raise _invalid(f"is not a sequence, got "
                       f"'{type(cells).__name__}'")

    all_cells = True
    for i, c in enumerate(cells):
        if isinstance(c, Cell):
            continue
        all_cells = False
        if not isinstance(c, Real):
            raise _invalid(f"index {i} is not a real number or Cell, got "
                           f"'{type(c).__name__}'")

    if not all_cells and not isinstance(cells, MutableSequence):
        raise _invalid(f"is immutable ('{type(cells).__name__}'), use a "
                       f"list, array or sequence of Cell")


def read_group(cells) -> NDArray[np.float64]:
    """Return a new flat float64 array of the current values."""
    if isinstance(cells, np.ndarray):
        return np.array(cells, dtype=np.float64).ravel()

    return np.fromiter((float(c) for c in cells), dtype=np.float64,
                       count=len(cells))


def write_group(cells, values: NDArray[np.float64]):
    """
    Overwrite the values held by `cells` with `values` (same length and
    order as `read_group`).  The original numeric type of each element
    is kept where possible.
    """
    if isinstance(cells, np.ndarray):
        cells[...] = values.reshape(cells.shape)  # Cast to array dtype.
        return

    for i, v in enumerate(values):
        c = cells[i]
        if isinstance(c, Cell):
            c.value = v
        elif isinstance(c, (float, np.floating)):
            cells[i] = type(c)(v)
        else:
            cells[i] = float(v)
