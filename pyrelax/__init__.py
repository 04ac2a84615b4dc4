"""
.. This module acts as the top-level API documentation.

.. module: pyrelax

Damped fixed-point iteration for models that update their own state.

.. autosummary::
    :toctree: generated/

    core
    solve

"""

__version__ = "0.1.0"

import sys

# Last updated: October 2026.

# ======================================================================

assert sys.version_info >= (3, 9)
