#!/usr/bin/env python3

# Examples of damped fixed-point iteration of simple models.
# Last updated: October 2026.

from pyrelax.core import Cell
from pyrelax.solve import (ErrorKind, IterationError, Option, find,
                           find_with_option)

# -- Single Variable ---------------------------------------------------

# Model x = 5 approached from x = 0.  Typically for precision = 1e-6
# about 16 iterations are needed with the default ratio.
x = [0.0]
counter = 0


def single_model():
    global counter
    counter += 1
    print(f"Value for iteration {counter:2d} is {x[0]:10.8e}")
    x[0] = 5


find(single_model, x)

# -- Two Variables In Cells --------------------------------------------

# Model y = 1 + x; x = 5 has the fixed point x = 5, y = 6.
xc, yc = Cell(name='x'), Cell(name='y')


def two_model():
    yc.value = 1 + xc.value
    xc.value = 5


its = find(two_model, [xc, yc], verbose=True)
print(f"\nResult after {its} iterations: {xc}, {yc}")

# -- Failure To Converge -----------------------------------------------

# A model that keeps stepping upwards never converges.
z = [0.0]


def runaway_model():
    z[0] += 1.0e-5


try:
    find_with_option(runaway_model, Option(maxits=50), z)
except IterationError as err:
    assert err.kind == ErrorKind.MAXIMAL_ITERATION
    print(f"\nFailed as expected:\n{err}")
