# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

import unittest
from unittest import mock

from slicefloor.geometry.geometry import Shape
from slicefloor.netlist.cell import Cell
from slicefloor.netlist.cell_library import CellLibrary
from slicefloor.slicing.errors import ErrorKind, InvalidExpression, UnknownCell, MalformedTree
from slicefloor.slicing.npe import Cut, is_valid_npe
from slicefloor.slicing.shape_curve import ShapePoint
from slicefloor.slicing.slicing_tree import LeafNode, OperatorNode
from slicefloor.slicing.tree_builder import build_slicing_tree


class TestBuildTree(unittest.TestCase):

    def setUp(self) -> None:
        self.cells = CellLibrary([Cell(c, 1) for c in "1234"])

    def test_leaf(self):
        root = build_slicing_tree("1", self.cells)
        self.assertIsInstance(root, LeafNode)
        self.assertIsNone(root.parent)
        self.assertIs(root.cell, self.cells["1"])

    def test_children(self):
        root = build_slicing_tree("12V3H", self.cells)
        assert isinstance(root, OperatorNode)
        self.assertEqual(root.cut, Cut.H)
        self.assertEqual(root.left.npe, "3")
        self.assertEqual(root.right.npe, "12V")
        right = root.right
        assert isinstance(right, OperatorNode)
        self.assertEqual(right.cut, Cut.V)
        self.assertEqual(right.right.npe, "1")
        self.assertEqual(right.left.npe, "2")
        self.assertIs(right.parent, root)
        self.assertIs(right.left.parent, right)
        self.assertIsNone(root.parent)

    def test_roundtrip(self):
        for npe in ["1", "12V", "12V3V", "12V34HV", "12H3V4H", "1234VHV"]:
            root = build_slicing_tree(npe, self.cells)
            self.assertEqual(root.npe, npe)
            self.assertTrue(is_valid_npe(root.npe))

    def test_leaves(self):
        root = build_slicing_tree("21V43HV", self.cells)
        self.assertEqual([leaf.name for leaf in root.leaves()], ["2", "1", "4", "3"])
        self.assertEqual(root.num_leaves, 4)

    def test_cells_are_shared(self):
        root1 = build_slicing_tree("12V", self.cells)
        root2 = build_slicing_tree("21H", self.cells)
        cells1 = {leaf.name: leaf.cell for leaf in root1.leaves()}
        cells2 = {leaf.name: leaf.cell for leaf in root2.leaves()}
        self.assertIs(cells1["1"], cells2["1"])

    def test_invalid(self):
        with self.assertRaises(InvalidExpression) as cm:
            build_slicing_tree("11V", self.cells)
        self.assertEqual(cm.exception.kind, ErrorKind.INVALID_EXPRESSION)
        self.assertRaises(InvalidExpression, build_slicing_tree, "1V2V", self.cells)
        self.assertRaises(InvalidExpression, build_slicing_tree, "", self.cells)

    def test_unknown_cell(self):
        with self.assertRaises(UnknownCell) as cm:
            build_slicing_tree("15V", self.cells)
        self.assertEqual(cm.exception.kind, ErrorKind.UNKNOWN_CELL)
        self.assertEqual(cm.exception.name, "5")

    def test_malformed(self):
        # Only reachable if the validation is skipped
        with mock.patch("slicefloor.slicing.tree_builder.check_npe"):
            with self.assertRaises(MalformedTree) as cm:
                build_slicing_tree("12", self.cells)
            self.assertEqual(cm.exception.kind, ErrorKind.MALFORMED_TREE)
            self.assertRaises(MalformedTree, build_slicing_tree, "1V2", self.cells)


class TestEvaluate(unittest.TestCase):

    def setUp(self) -> None:
        self.cells = CellLibrary([Cell("A", 4, 1), Cell("B", 4, 4), Cell("C", 8, 2, fixed=True)])

    def test_single_cell(self):
        cells = CellLibrary([Cell("A", 4, 1, fixed=True)])
        root = build_slicing_tree("A", cells)
        self.assertEqual(root.evaluate(), 4)
        self.assertEqual(root.selected, ShapePoint(2, 2))
        self.assertEqual(root.reconstruct(), {"A": Shape(2, 2)})

    def test_two_cells(self):
        root = build_slicing_tree("ABV", self.cells)
        self.assertEqual(root.evaluate(), 12)
        self.assertEqual(root.area, 12)
        self.assertEqual(root.selected, ShapePoint(3, 4))
        self.assertAlmostEqual(root.aspect_ratio, 4 / 3)
        self.assertEqual(len(root.curve), 2)
        self.assertEqual(root.reconstruct(), {"A": Shape(2, 2), "B": Shape(1, 4)})
        self.assertEqual(root.reconstruct(ShapePoint(6, 2, root.curve.points[1].right_source,
                                                     root.curve.points[1].left_source)),
                         {"A": Shape(2, 2), "B": Shape(4, 1)})

    def test_three_cells(self):
        root = build_slicing_tree("ABVCH", self.cells)
        self.assertEqual(root.evaluate(), 24)
        self.assertEqual(root.selected, ShapePoint(3, 8))
        self.assertEqual([(p.width, p.height) for p in root.curve], [(3, 8), (6, 6)])
        shapes = root.reconstruct()
        self.assertEqual(shapes, {"A": Shape(2, 2), "B": Shape(1, 4), "C": Shape(2, 4)})
        self.assertEqual(sum(s.area for s in shapes.values()), self.cells.total_area)

    def test_subtrees(self):
        root = build_slicing_tree("ABVCH", self.cells)
        root.evaluate()
        assert isinstance(root, OperatorNode)
        self.assertEqual(root.right.area, 12)
        self.assertEqual(root.left.area, 8)
        self.assertTrue(root.right.is_evaluated)

    def test_not_evaluated(self):
        root = build_slicing_tree("ABV", self.cells)
        self.assertFalse(root.is_evaluated)
        self.assertRaises(AssertionError, root.reconstruct)
        with self.assertRaises(AssertionError):
            _ = root.area

    def test_area_lower_bound(self):
        cells = CellLibrary([Cell(c, i + 1, 0.5 + i) for i, c in enumerate("12345")])
        for npe in ["12V3V4V5V", "12H3H4H5H", "12V34HV5H", "213H54VHV"]:
            root = build_slicing_tree(npe, cells)
            area = root.evaluate()
            self.assertGreaterEqual(area, cells.total_area - 1e-9)
            self.assertTrue(root.curve.is_pareto())
            self.assertEqual(set(root.reconstruct().keys()), set("12345"))


if __name__ == '__main__':
    unittest.main()
