from __future__ import annotations

from enum import IntEnum


# Last updated: October 2026.


# ======================================================================

class SolverError(RuntimeError):
    """
    This exception is raised when an algorithm / solver / etc fails to
    converge or find a solution.  Additional information (optional) is
    included to allow the reason for the failure to be determined.

    Notes
    -----
    `SolverError` may also have additional attributes not listed here
    depending on the specific solver being used.
    """

    def __init__(self, *args, flag: int = None, details: str = None,
                 **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Numeric status code giving some information about the
            result.  `flag` == 0 is never used for a failure.
        details : str, default = None
            Additional text relating to the specific type of failure.
        kwargs :
            Additional attributes can be added to the object using
            keyword arguments.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self._extra_items():
            error_str += f"\n{k} -> {v}"
        return error_str

    def _extra_items(self):
        # Attributes shown by __str__, in insertion order.
        return [(k, v) for k, v in self.__dict__.items() if v is not None]


# ----------------------------------------------------------------------

class ErrorKind(IntEnum):
    """
    Reason that a damped fixed-point iteration did not complete.  The
    integer value is used as the `flag` of the corresponding
    `IterationError`.
    """
    MAXIMAL_ITERATION = 1
    INTERNAL_ERROR = 2
    NOT_VALID_VALUE = 3
    INVALID_INPUT = 4

    @property
    def description(self) -> str:
        """Human-readable description of this kind of failure."""
        return _KIND_DESCRIPTIONS[self]


_KIND_DESCRIPTIONS = {
    ErrorKind.MAXIMAL_ITERATION: "Maximal iteration reached before "
                                 "convergence.",
    ErrorKind.INTERNAL_ERROR: "Error raised by the update function.",
    ErrorKind.NOT_VALID_VALUE: "Not valid value (NaN or infinite).",
    ErrorKind.INVALID_INPUT: "Invalid input.",
}


# ----------------------------------------------------------------------

class IterationError(SolverError):
    """
    Raised by `find` and `find_with_option` when a damped fixed-point
    iteration fails.  The type of failure is given by `kind`.

    Attributes
    ----------
    kind : ErrorKind
        Reason for the failure.
    last_precision : float or None
        For ``MAXIMAL_ITERATION`` failures this is the largest relative
        change of any variable during the last completed iteration (0.0
        if no iteration was completed).  Otherwise `None`.

    Notes
    -----
    When the update function raises, the `IterationError` is chained
    to the original exception (``raise ... from exc``), which remains
    available unmodified as ``err.__cause__``.
    """

    def __init__(self, kind: ErrorKind, *args,
                 last_precision: float = None, **kwargs):
        """
        Parameters
        ----------
        kind : ErrorKind
            Reason for the failure.  Sets `flag` and `details`.
        args :
            Passed to `SolverError`.
        last_precision : float, optional
            Last observed maximum relative change.
        kwargs :
            Additional attributes, as for `SolverError`.
        """
        kind = ErrorKind(kind)
        super().__init__(*args, flag=int(kind), details=kind.description,
                         **kwargs)
        self.kind = kind
        self.last_precision = last_precision

    def _extra_items(self):
        items = []
        for k, v in super()._extra_items():
            if k == 'kind':
                v = v.name
            elif k == 'last_precision':
                v = f"{v:.3e}"
            items.append((k, v))
        return items
