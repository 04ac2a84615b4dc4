from unittest import TestCase

import numpy as np


# ======================================================================

class TestCell(TestCase):
    def test_cell(self):
        from pyrelax.core import Cell

        c = Cell()
        self.assertEqual(c.value, 0.0)
        self.assertIsInstance(c.value, float)
        self.assertIsNone(c.name)
        self.assertEqual(repr(c), "Cell(0.0)")

        c.value = 3  # Converted to dtype.
        self.assertIsInstance(c.value, float)
        self.assertEqual(float(c), 3.0)

        d = Cell(2.5, name='d')
        self.assertEqual(repr(d), "Cell('d', 2.5)")

    def test_callback(self):
        from pyrelax.core import Cell

        updates = []
        c = Cell(1.0, name='c', callback=lambda cell: updates.append(
            (cell.name, cell.value)))
        self.assertEqual(updates, [])  # Not called on construction.

        c.value = 4.0
        c.value = 5.0
        self.assertEqual(updates, [('c', 4.0), ('c', 5.0)])

    def test_dtype(self):
        from pyrelax.core import Cell

        class Metres(float):
            pass

        h = Cell(2, dtype=Metres)
        self.assertIs(type(h.value), Metres)
        h.value = np.float64(7.5)
        self.assertIs(type(h.value), Metres)
        self.assertEqual(h.value, 7.5)

        s = Cell(1.0, dtype=np.float32)
        s.value = 0.1
        self.assertIs(type(s.value), np.float32)
        self.assertEqual(float(s), float(np.float32(0.1)))
