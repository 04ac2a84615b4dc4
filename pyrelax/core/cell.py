"""
Provides the `Cell` class, a named and observable floating point slot.
Cells allow a model to share individual variables with a solver, which
reads and overwrites their values in place.

An optional callback is called immediately after every update of the
value (i.e. on set).  This can be used to update dependent internal
state, record a history, etc.

Example
-------

We make two cells and record each update of `x`:

>>> history = []
>>> x = Cell(0.0, name='x', callback=lambda c: history.append(c.value))
>>> y = Cell(name='y')
>>> x.value = 5
>>> y.value = 1 + x.value
>>> x, y
(Cell('x', 5.0), Cell('y', 6.0))
>>> history
[5.0]
>>> float(y)
6.0

A domain-specific `float` subclass can be used for the stored value:

>>> class Metres(float):
...     pass
>>> h = Cell(2, name='h', dtype=Metres)
>>> type(h.value).__name__
'Metres'
"""
from __future__ import annotations

from typing import Any, Callable

# Last updated: October 2026.


# ======================================================================

class Cell:
    """
    A mutable floating point value with an optional name.  Setting
    `value` converts the new value using `dtype` then calls `callback`
    (if given) with the cell as the only argument.

    Parameters
    ----------
    value : float, default = 0.0
        Initial value.  This does not trigger the callback.
    name : str, optional
        Name used for display.
    dtype : type, default = float
        Type used to store the value.  This must be convertible to and
        from `float`, e.g. `float` itself, a `float` subclass or a NumPy
        floating type.
    callback : Callable[[Cell], Any], optional
        Called after each update of `value`.
    """

    def __init__(self, value=0.0, name: str = None, dtype: type = float,
                 callback: Callable[[Cell], Any] = None):
        self.name = name
        self.dtype = dtype
        self.callback = callback
        self._value = dtype(value)

    def __float__(self) -> float:
        return float(self._value)

    def __repr__(self) -> str:
        if self.name is None:
            return f"Cell({float(self._value)!r})"
        return f"Cell({self.name!r}, {float(self._value)!r})"

    # -- Public Methods ------------------------------------------------

    @property
    def value(self):
        """The current value, stored as type `dtype`."""
        return self._value

    @value.setter
    def value(self, value):
        self._value = self.dtype(value)
        if self.callback is not None:
            self.callback(self)
