# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Shape curves of slicing floorplans.

The shape curve of a subtree is the set of (width, height) realizations of the
subtree that are not dominated by any other realization. A point p dominates
a point q if p.width <= q.width and p.height <= q.height. The points of an
operator's curve keep references to the points of the children's curves
that produced them, so that the shape of every cell can be reconstructed.
"""

from dataclasses import dataclass, field
from typing import Iterator, Optional

from slicefloor.geometry.geometry import Shape
from slicefloor.netlist.cell import Cell
from slicefloor.slicing.npe import Cut


@dataclass(frozen=True)
class ShapePoint:
    """
    A realization (width, height) of a subtree. Two points are equal if they
    have the same width and height, regardless of their sources.
    """
    width: float
    height: float
    right_source: Optional['ShapePoint'] = field(default=None, compare=False, repr=False)
    left_source: Optional['ShapePoint'] = field(default=None, compare=False, repr=False)

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def shape(self) -> Shape:
        return Shape(self.width, self.height)

    @property
    def is_leaf_point(self) -> bool:
        """Indicates whether the point has no sources (it belongs to a cell)"""
        return self.right_source is None and self.left_source is None

    def dominates(self, other: 'ShapePoint') -> bool:
        """Checks whether the point is no larger than the other one in both dimensions"""
        return self.width <= other.width and self.height <= other.height


class ShapeCurve:
    """
    Pareto frontier of (width, height) points. The points are kept in insertion
    order. The order is not relevant for the frontier, but it determines the
    point selected when several points have the same minimum area.
    """

    _points: list[ShapePoint]

    def __init__(self, points: Optional[list[ShapePoint]] = None):
        self._points = []
        for p in points or []:
            self.insert(p)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[ShapePoint]:
        return iter(self._points)

    def __contains__(self, p: object) -> bool:
        return p in self._points

    def __repr__(self) -> str:
        points = ', '.join(f"({p.width}, {p.height})" for p in self._points)
        return f"ShapeCurve[{points}]"

    @property
    def points(self) -> list[ShapePoint]:
        return list(self._points)

    def insert(self, candidate: ShapePoint) -> bool:
        """
        Inserts a point in the curve, unless an equal point or a point dominating
        it already exists (the curve is not modified in that case). The points
        dominated by the new point are removed.
        :param candidate: the new point
        :return: True if the point has been inserted, and False otherwise
        """
        for p in self._points:
            if p == candidate or p.dominates(candidate):
                return False
        self._points = [p for p in self._points if not candidate.dominates(p)]
        self._points.append(candidate)
        return True

    def min_area_point(self) -> ShapePoint:
        """
        Returns the point with minimum area. In case of ties, the first point
        (in insertion order) is returned.
        """
        assert len(self._points) > 0, "Empty shape curve"
        best = self._points[0]
        for p in self._points[1:]:
            if p.area < best.area:
                best = p
        return best

    def is_pareto(self) -> bool:
        """Checks that no point of the curve dominates another point"""
        return not any(p is not q and p.dominates(q) for p in self._points for q in self._points)


def leaf_curve(cell: Cell) -> ShapeCurve:
    """
    Generates the shape curve of a cell. The curve has the preferred orientation
    of the cell and, if the cell is not fixed, the rotated orientation
    (only if it is different)
    :param cell: the cell
    :return: the shape curve
    """
    return ShapeCurve([ShapePoint(s.w, s.h) for s in cell.shapes])


def merge(right: ShapeCurve, left: ShapeCurve, cut: Cut) -> ShapeCurve:
    """
    Combines the curves of two sub-floorplans with a cut. Every pair of points
    generates a candidate point: with a vertical cut the widths are added and
    the height is the maximum height, with a horizontal cut the heights are
    added and the width is the maximum width.
    :param right: curve of the right child
    :param left: curve of the left child
    :param cut: the cut operator
    :return: the curve of the combination (only non-dominated points)
    """
    curve = ShapeCurve()
    for r in right:
        for lft in left:
            if cut is Cut.V:
                w, h = r.width + lft.width, max(r.height, lft.height)
            else:
                w, h = max(r.width, lft.width), r.height + lft.height
            curve.insert(ShapePoint(w, h, right_source=r, left_source=lft))
    return curve
