# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Slicing trees. The leaves are cells and the internal nodes are cut operators
that combine two sub-floorplans. The evaluation of a tree computes the shape
curve of every node (bottom-up) and selects the realization with minimum area.
"""

import logging
from typing import Iterator, Optional

from slicefloor.geometry.geometry import Shape
from slicefloor.netlist.cell import Cell
from slicefloor.slicing.npe import Cut
from slicefloor.slicing.shape_curve import ShapeCurve, ShapePoint, leaf_curve, merge

logger = logging.getLogger(__name__)


class SlicingNode:
    """
    Base class for the nodes of a slicing tree
    """

    parent: Optional['OperatorNode']  # Parent of the node (not owned)
    _curve: Optional[ShapeCurve]  # Shape curve of the subtree
    _selected: Optional[ShapePoint]  # Realization with minimum area

    def __init__(self) -> None:
        self.parent = None
        self._curve = None
        self._selected = None

    @property
    def is_leaf(self) -> bool:
        return False

    @property
    def is_evaluated(self) -> bool:
        return self._selected is not None

    @property
    def curve(self) -> ShapeCurve:
        """Shape curve of the subtree"""
        assert self._curve is not None, "The shape curve has not been calculated (call evaluate)"
        return self._curve

    @property
    def selected(self) -> ShapePoint:
        """The point of the shape curve with minimum area"""
        assert self._selected is not None, "The slicing tree has not been evaluated"
        return self._selected

    @property
    def area(self) -> float:
        """Minimum area of the subtree"""
        return self.selected.area

    @property
    def aspect_ratio(self) -> float:
        """Aspect ratio (height/width) of the minimum-area realization"""
        return self.selected.height / self.selected.width

    @property
    def npe(self) -> str:
        """Normalized Polish Expression of the subtree"""
        raise NotImplementedError

    @property
    def num_leaves(self) -> int:
        return sum(1 for _ in self.leaves())

    def leaves(self) -> Iterator['LeafNode']:
        """Leaves of the subtree (in NPE order)"""
        raise NotImplementedError

    def evaluate(self) -> float:
        """
        Calculates the shape curve of the subtree and selects the point with minimum area
        :return: the minimum area
        """
        raise NotImplementedError

    def reconstruct(self, point: Optional[ShapePoint] = None) -> dict[str, Shape]:
        """
        Obtains the shapes of the cells that realize a point of the shape curve,
        following the sources of the points down to the leaves
        :param point: point of the curve of the node (the selected one if None)
        :return: a dictionary with the shape of each cell
        """
        shapes: dict[str, Shape] = {}
        self._reconstruct(self.selected if point is None else point, shapes)
        return shapes

    def _reconstruct(self, point: ShapePoint, shapes: dict[str, Shape]) -> None:
        raise NotImplementedError


class LeafNode(SlicingNode):
    """
    A leaf of the slicing tree. The cell is borrowed, not owned
    """

    _cell: Cell

    def __init__(self, cell: Cell):
        super().__init__()
        self._cell = cell
        self._curve = leaf_curve(cell)
        self._selected = self._curve.min_area_point()

    def __repr__(self) -> str:
        return f"Leaf<{self.name}>"

    @property
    def is_leaf(self) -> bool:
        return True

    @property
    def cell(self) -> Cell:
        return self._cell

    @property
    def name(self) -> str:
        return self._cell.name

    @property
    def npe(self) -> str:
        return self.name

    def leaves(self) -> Iterator['LeafNode']:
        yield self

    def evaluate(self) -> float:
        return self.area

    def _reconstruct(self, point: ShapePoint, shapes: dict[str, Shape]) -> None:
        assert point in self.curve, f"Cell {self.name}: the point {point} does not belong to the shape curve"
        shapes[self.name] = point.shape


class OperatorNode(SlicingNode):
    """
    An internal node of the slicing tree (a cut). The node owns its children
    """

    _cut: Cut
    _right: SlicingNode
    _left: SlicingNode

    def __init__(self, cut: Cut, right: SlicingNode, left: SlicingNode):
        """
        Constructor
        :param cut: the cut operator (V or H)
        :param right: right child (first operand of the postfix expression)
        :param left: left child (second operand of the postfix expression)
        """
        super().__init__()
        assert right.parent is None and left.parent is None, "The children already have a parent"
        self._cut = cut
        self._right, self._left = right, left
        right.parent = left.parent = self

    def __repr__(self) -> str:
        return f"Operator<{self._cut.value}>"

    @property
    def cut(self) -> Cut:
        return self._cut

    @property
    def right(self) -> SlicingNode:
        return self._right

    @property
    def left(self) -> SlicingNode:
        return self._left

    @property
    def npe(self) -> str:
        return self._right.npe + self._left.npe + self._cut.value

    def leaves(self) -> Iterator[LeafNode]:
        yield from self._right.leaves()
        yield from self._left.leaves()

    def evaluate(self) -> float:
        # Leaves carry their curve from construction
        if not self._right.is_leaf:
            self._right.evaluate()
        if not self._left.is_leaf:
            self._left.evaluate()
        self._curve = merge(self._right.curve, self._left.curve, self._cut)
        self._selected = self._curve.min_area_point()
        logger.debug("%s cut: %d points in the shape curve, selected %s",
                     self._cut.value, len(self._curve), self._selected)
        return self.area

    def _reconstruct(self, point: ShapePoint, shapes: dict[str, Shape]) -> None:
        assert point.right_source is not None and point.left_source is not None, \
            f"The point {point} has no sources"
        self._right._reconstruct(point.right_source, shapes)
        self._left._reconstruct(point.left_source, shapes)
