"""
==========================
Core (:mod:`pyrelax.core`)
==========================

.. currentmodule:: pyrelax.core

Basic types shared between models and solvers.

.. autosummary::
    :toctree:

    Cell
"""

from .cell import Cell
