from __future__ import annotations

import operator
import warnings
from collections.abc import Callable

import numpy as np
from numpy.typing import NDArray

from pyrelax.solve._groups import check_group, read_group, write_group
from pyrelax.solve.exception import ErrorKind, IterationError
from pyrelax.solve.option import (DEFAULT_MAXITS, DEFAULT_PRECISION,
                                  DEFAULT_RATIO, Option)


# Last updated: October 2026.


# ======================================================================

def find(func: Callable[[], object], *groups, maxits: int = DEFAULT_MAXITS,
         ratio: float = DEFAULT_RATIO, precision: float = DEFAULT_PRECISION,
         verbose: bool = False) -> int:
    r"""
    Find the fixed point of a model by damped (relaxed) successive
    substitution.  `func` is called repeatedly and updates the values
    held in `groups` in place.  After each call, the variables that
    have not yet converged are moved back towards their previous values
    so that only a fraction `ratio` of each step is taken:

    .. math:: x' = x_{last} + r(x - x_{last})

    This continues until the relative change of every variable is
    within `precision`.  This is a convenience form of
    `find_with_option`; refer to that function for full details.

    Examples
    --------
    The model ``y = 1 + x; x = 5`` has the fixed point ``x = 5, y = 6``.
    Here each variable is held in a separate group:

    >>> x, y = [0.0], [0.0]
    >>> def model():
    ...     y[0] = 1 + x[0]
    ...     x[0] = 5
    >>> its = find(model, x, y, verbose=True)  # doctest: +ELLIPSIS
    Damped Fixed Point Iteration:
    ... Iteration 1: Max. relative change = 5.000000e+00
    ... Iteration 2: Max. relative change = 5.618034e+00
    ...
    ... Converged.
    >>> its
    19
    >>> print(f"x = {x[0]:.5f}, y = {y[0]:.5f}")
    x = 5.00000, y = 6.00000

    Parameters
    ----------
    func : Callable[[], Any]
        Model update function, see `find_with_option`.
    groups :
        Zero or more groups of variables, see `find_with_option`.
    maxits : int, default = 500
        Maximum number of calls to `func`.
    ratio : float, default = 2 / (1 + √5)
        Damping ratio.
    precision : float, default = 1e-6
        Relative change required for convergence.
    verbose : bool, default = False
        If True, print progress of each iteration.

    Returns
    -------
    its : int
        Number of calls made to `func`.

    Raises
    ------
    IterationError
        If the iteration fails for any reason.
    """
    return _run(func, Option(maxits=maxits, ratio=ratio,
                             precision=precision, verbose=verbose), groups)


# ----------------------------------------------------------------------

def find_with_option(func: Callable[[], object], option: Option,
                     *groups) -> int:
    r"""
    Find the fixed point of a model by damped successive substitution,
    using the settings given in `option`.

    The procedure is as follows:

        1. Values of all groups are recorded as :math:`x_{last}`.
        2. `func` is called, updating the variables in place.
        3. The relative change of each variable is found as
           :math:`|(x - x_{last}) / x_{last}|`, or :math:`|x|` when
           :math:`x_{last} = 0`.
        4. If the largest relative change of all variables is
           ``<= option.precision`` the iteration stops.  The variables
           keep the values set by `func`.
        5. Otherwise each group with any relative change ``>
           option.precision`` is relaxed: :math:`x \leftarrow x_{last} +
           r(x - x_{last})`.  Groups that have individually converged are
           left as set by `func`.
        6. All groups are recorded as :math:`x_{last}` and the process
           repeats from step 2.

    Parameters
    ----------
    func : Callable[[], Any]
        Zero-argument function that reads the current variables and
        writes new estimates into any of them.  Any return value is
        ignored.  Failure is signalled by raising an exception.  `func`
        must not keep references to the groups beyond its own call.
    option : Option
        Iteration limit, damping ratio, precision and verbosity.
    groups :
        Zero or more groups of variables, owned by the caller.  Each
        group may be a NumPy array of floating dtype, a mutable sequence
        of real numbers (e.g. a `list`) or a sequence of `Cell` objects.
        Groups may be empty.  Values are converted to float64 for all
        arithmetic and are written back in the group's own type.

    Returns
    -------
    its : int
        Number of calls made to `func` (≥ 1).

    Raises
    ------
    IterationError
        With `kind` set as follows:
            - ``INVALID_INPUT``: Illegal option or group, raised before
              `func` is called.  ``option.maxits`` must be an integer.
            - ``MAXIMAL_ITERATION``: `func` was called ``option.maxits``
              times without convergence.  `last_precision` gives the
              largest relative change from the last iteration.
            - ``INTERNAL_ERROR``: `func` raised an exception, or the
              callback of a `Cell` raised while a relaxed value was
              written.  The original exception is chained as
              ``__cause__``.
            - ``NOT_VALID_VALUE``: After calling `func`, a variable was
              NaN, infinite or not a number, or a group changed length.

        After any failure except ``INVALID_INPUT`` the variables hold the
        values from the most recent call to `func`.  The exception is a
        `Cell` callback failure, where the group being relaxed is left
        partly written.

    Warns
    -----
    RuntimeWarning
        If ``option.ratio > 1``, as each step is amplified instead of
        damped.
    """
    return _run(func, option, groups)


# ======================================================================

def _run(func, option: Option, groups: tuple) -> int:
    # Called directly by each public entry point; warnings from
    # _check_inputs rely on this call depth.
    _check_inputs(func, option, groups)

    maxits, ratio = option.maxits, option.ratio
    precision, verbose = option.precision, option.verbose

    x_last = [read_group(cells) for cells in groups]
    last_prec = 0.0  # No iterations completed.

    if verbose:
        print(f"Damped Fixed Point Iteration:")

    its = 0
    while True:
        if its >= maxits:
            if verbose:
                print(f"... Failed: Limit of {maxits} iterations reached.")
            raise IterationError(
                ErrorKind.MAXIMAL_ITERATION,
                f"Iteration {its} >= max iteration {maxits}.",
                last_precision=last_prec)

        try:
            func()
        except Exception as exc:
            if verbose:
                print(f"... Failed: Update function raised "
                      f"{type(exc).__name__}.")
            raise IterationError(
                ErrorKind.INTERNAL_ERROR,
                f"Update function failed at iteration {its + 1}: "
                f"{exc}") from exc

        its += 1

        # Check new values and find relative change for each group.
        x_new = []
        precs = np.zeros(len(groups))
        for g, cells in enumerate(groups):
            x = _read_checked(cells, g, x_last[g].size)
            _check_finite(x, g)
            precs[g] = _max_rel_change(x, x_last[g])
            x_new.append(x)

        prec = float(precs.max(initial=0.0))
        if verbose:
            print(f"... Iteration {its}: Max. relative change = "
                  f"{prec:.6e}")

        if prec <= precision:
            if verbose:
                print(f"... Converged.")
            return its

        # Relax groups that have not converged and record all values.
        for g, cells in enumerate(groups):
            if precs[g] > precision:
                try:
                    write_group(cells, x_last[g] + (x_new[g] - x_last[g]) *
                                ratio)
                except Exception as exc:
                    if verbose:
                        print(f"... Failed: Writing group {g} raised "
                              f"{type(exc).__name__}.")
                    raise IterationError(
                        ErrorKind.INTERNAL_ERROR,
                        f"Writing relaxed values to group {g} failed "
                        f"at iteration {its}: {exc}", group=g) from exc
            x_last[g] = read_group(cells)

        last_prec = prec


# ======================================================================

def _check_inputs(func, option: Option, groups: tuple):
    # Order of checks is significant; the first failure is raised.
    try:
        operator.index(option.maxits)
    except TypeError:
        raise IterationError(ErrorKind.INVALID_INPUT,
                             f"Max iteration must be an integer, got "
                             f"{option.maxits!r}.")
    if not option.maxits > 0:
        raise IterationError(ErrorKind.INVALID_INPUT,
                             f"Max iteration is negative or zero, got "
                             f"{option.maxits}.")
    if not option.ratio > 0:
        raise IterationError(ErrorKind.INVALID_INPUT,
                             f"Ratio is negative or zero, got "
                             f"{option.ratio}.")
    if not option.precision > 0:
        raise IterationError(ErrorKind.INVALID_INPUT,
                             f"Precision is negative or zero, got "
                             f"{option.precision}.")
    if func is None:
        raise IterationError(ErrorKind.INVALID_INPUT, "Function is null.")
    if not callable(func):
        raise IterationError(ErrorKind.INVALID_INPUT,
                             f"Function is not callable, got "
                             f"'{type(func).__name__}'.")

    for g, cells in enumerate(groups):
        check_group(cells, g)

    if option.ratio > 1:
        warnings.warn(f"Ratio = {option.ratio} > 1 amplifies each step "
                      f"instead of damping it.", RuntimeWarning,
                      stacklevel=4)


def _read_checked(cells, g: int, size: int) -> NDArray[np.float64]:
    """
    Read group `g` after the update function has run, raising
    ``NOT_VALID_VALUE`` if a value is not a number or the group no
    longer has `size` values.
    """
    try:
        x = read_group(cells)
    except (TypeError, ValueError) as exc:
        raise IterationError(ErrorKind.NOT_VALID_VALUE,
                             f"Group {g} holds a value that is not a "
                             f"number: {exc}", group=g) from exc

    if x.size != size:
        raise IterationError(ErrorKind.NOT_VALID_VALUE,
                             f"Group {g} changed length from {size} to "
                             f"{x.size}.", group=g)
    return x


def _check_finite(x: NDArray[np.float64], g: int):
    """Raise ``NOT_VALID_VALUE`` for the first NaN or infinite value."""
    bad = ~np.isfinite(x)
    if not bad.any():
        return

    i = int(np.argmax(bad))
    what = 'NaN' if np.isnan(x[i]) else 'infinite'
    raise IterationError(ErrorKind.NOT_VALID_VALUE,
                         f"Group {g}, index {i} is {what}.",
                         group=g, index=i)


def _max_rel_change(x: NDArray[np.float64],
                    x_last: NDArray[np.float64]) -> float:
    """
    Largest relative change from `x_last` to `x`.  Where `x_last` is
    zero the absolute value of `x` is used.  Returns 0.0 for empty
    arrays.
    """
    if x.size == 0:
        return 0.0

    denom = np.where(x_last == 0.0, 1.0, x_last)  # Gives |x| for zero.
    return float(np.max(np.abs((x - x_last) / denom)))
