"""
Configuration of the damped fixed-point iteration.
"""
from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass

# Last updated: October 2026.

# ======================================================================

DEFAULT_MAXITS = 500
"""Default iteration limit.  Typically only 15-25 iterations are
required for ``precision=1e-6``."""

DEFAULT_RATIO = 2 / (1 + math.sqrt(5))
"""Default damping ratio, the inverse of the golden ratio
(≈ 0.618).  This gives fast, stable contraction for a wide class of
fixed-point problems without tuning."""

DEFAULT_PRECISION = 1e-6
"""Default maximum relative change of any variable at convergence."""


# ----------------------------------------------------------------------

@dataclass(frozen=True)
class Option:
    """
    Options controlling `find_with_option`.  A new `Option` uses the
    module defaults; a modified copy can be made using `replace`.

    Examples
    --------
    >>> opt = Option()
    >>> opt.maxits, round(opt.ratio, 6), opt.precision
    (500, 0.618034, 1e-06)
    >>> opt.replace(maxits=20).maxits
    20

    Parameters
    ----------
    maxits : int, default = 500
        Maximum number of calls to the update function.  Must be > 0.
    ratio : float, default = 2 / (1 + √5)
        Damping ratio, being the fraction of the step from the previous
        value to the new value that is taken each iteration.  Must be >
        0.  Values in (0, 1] damp the iteration; values > 1 amplify it
        and produce a warning.
    precision : float, default = 1e-6
        Iteration stops when the relative change of every variable is
        ``<= precision``.  Must be > 0.
    verbose : bool, default = False
        If True, print progress of each iteration.

    Notes
    -----
    Values are not checked here; they are checked when the iteration
    starts.
    """
    maxits: int = DEFAULT_MAXITS
    ratio: float = DEFAULT_RATIO
    precision: float = DEFAULT_PRECISION
    verbose: bool = False

    def replace(self, **changes) -> Option:
        """Return a copy of this `Option` with the given fields
        changed."""
        return dataclasses.replace(self, **changes)
