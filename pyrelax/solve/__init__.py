"""
===============================
Solvers (:mod:`pyrelax.solve`)
===============================

.. currentmodule:: pyrelax.solve

Damped fixed-point iteration of models that update caller-owned
variables in place.

Functions
---------

.. autosummary::
    :toctree:

    find
    find_with_option

Options
-------

.. autosummary::
    :toctree:

    Option

Exceptions
----------

.. autosummary::
    :toctree:

    ErrorKind
    IterationError
    SolverError

"""

from .exception import ErrorKind, IterationError, SolverError
from .option import (DEFAULT_MAXITS, DEFAULT_PRECISION, DEFAULT_RATIO,
                     Option)
from .relaxation import find, find_with_option
