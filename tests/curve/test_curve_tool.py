# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

import matplotlib

matplotlib.use("Agg")

from slicefloor.slicing.shape_curve import ShapeCurve, ShapePoint  # noqa: E402
from tools.curve.curve import main, staircase  # noqa: E402

CELLS = """
Cells:
  A: {area: 4, aspect_ratio: 1}
  B: {area: 4, aspect_ratio: 4}
"""


class TestCurveTool(unittest.TestCase):

    def test_staircase(self):
        curve = ShapeCurve([ShapePoint(6, 2), ShapePoint(3, 4), ShapePoint(4, 3)])
        xs, ys = staircase(curve)
        self.assertEqual(xs, [3, 4, 4, 6, 6])
        self.assertEqual(ys, [4, 4, 3, 3, 2])

    def test_plot(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            cells = os.path.join(tmpdir, "cells.yml")
            with open(cells, "w") as f:
                f.write(CELLS)
            image = os.path.join(tmpdir, "curve.png")
            self.assertEqual(main("slicefloor curve", ["-c", cells, "-o", image, "ABV"]), 0)
            self.assertTrue(os.path.getsize(image) > 0)

    def test_missing_cells_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            missing = os.path.join(tmpdir, "no_cells.txt")
            out = io.StringIO()
            with redirect_stdout(out):
                status = main("slicefloor curve", ["-c", missing, "ABV"])
            self.assertEqual(status, 1)
            self.assertTrue(out.getvalue().startswith(f"Error: cannot read the cells file {missing}"))


if __name__ == '__main__':
    unittest.main()
