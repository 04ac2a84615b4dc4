from unittest import TestCase

import numpy as np

from pyrelax.core import Cell
from pyrelax.solve._groups import check_group, read_group, write_group


# ======================================================================

class TestGroups(TestCase):
    def test_read_write_list(self):
        cells = [1, 2.5, np.float32(3.0)]
        check_group(cells, 0)
        x = read_group(cells)
        self.assertEqual(x.dtype, np.float64)
        self.assertEqual(x.tolist(), [1.0, 2.5, 3.0])

        write_group(cells, np.array([0.5, 1.5, 2.5]))
        self.assertEqual(cells, [0.5, 1.5, 2.5])
        self.assertIs(type(cells[0]), float)  # Was int.
        self.assertIs(type(cells[2]), np.float32)

    def test_read_write_array(self):
        cells = np.arange(6, dtype=np.float32).reshape(2, 3)
        check_group(cells, 0)
        x = read_group(cells)
        self.assertEqual(x.shape, (6,))
        self.assertEqual(x.dtype, np.float64)

        x[0] = 10.0  # Snapshot is a copy.
        self.assertEqual(cells[0, 0], 0.0)

        write_group(cells, np.linspace(1.0, 6.0, 6))
        self.assertEqual(cells.dtype, np.float32)
        self.assertEqual(cells[1].tolist(), [4.0, 5.0, 6.0])

    def test_read_write_cells(self):
        cells = (Cell(1.0, name='a'), Cell(2.0, name='b'))
        check_group(cells, 0)  # Tuple is fine for cells.
        self.assertEqual(read_group(cells).tolist(), [1.0, 2.0])

        write_group(cells, np.array([3.0, 4.0]))
        self.assertEqual([c.value for c in cells], [3.0, 4.0])

    def test_empty(self):
        for cells in ([], (), np.array([])):
            check_group(cells, 0)
            self.assertEqual(read_group(cells).size, 0)
