# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Cells (leaf modules) of a slicing floorplan
"""

import math
from slicefloor.geometry.geometry import Shape
from slicefloor.utils.utils import valid_cell_name, is_number


class Cell:
    """
    Class to represent a cell of the floorplan. A cell has a fixed area and a
    preferred aspect ratio (height/width). If the cell is not fixed, it can also
    be rotated 90 degrees. Cells are immutable once created.
    """

    _name: str  # Name of the cell (one character)
    _area: float  # Area of the cell
    _aspect_ratio: float  # Aspect ratio (height/width)
    _fixed: bool  # Is the orientation fixed (cannot be rotated)?
    _shape: Shape  # Shape in the preferred orientation

    def __init__(self, name: str, area: float, aspect_ratio: float = 1.0, fixed: bool = False):
        """
        Constructor
        :param name: name of the cell (a letter or a digit, not an operator)
        :param area: area of the cell (positive)
        :param aspect_ratio: aspect ratio, height/width (positive)
        :param fixed: whether the orientation of the cell is fixed
        """
        assert valid_cell_name(name), f"Incorrect cell name: {name}"
        assert is_number(area) and math.isfinite(area) and area > 0, \
            f"Cell {name}: incorrect area (should be a finite positive number)"
        assert is_number(aspect_ratio) and math.isfinite(aspect_ratio) and aspect_ratio > 0, \
            f"Cell {name}: incorrect aspect ratio (should be a finite positive number)"
        assert isinstance(fixed, bool), f"Cell {name}: incorrect value for fixed (should be a boolean)"

        self._name = name
        self._area = float(area)
        self._aspect_ratio = float(aspect_ratio)
        self._fixed = fixed
        height = math.sqrt(self._aspect_ratio * self._area)
        self._shape = Shape(self._area / height, height)

    def _key(self) -> tuple[str, float, float, bool]:
        return self._name, self._area, self._aspect_ratio, self._fixed

    def __hash__(self) -> int:
        return hash(self._key())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Cell) and self._key() == other._key()

    def __repr__(self) -> str:
        fixed = ", fixed" if self.is_fixed else ""
        return f"Cell<{self.name}, area={self.area}, aspect_ratio={self.aspect_ratio}{fixed}>"

    @property
    def name(self) -> str:
        return self._name

    @property
    def area(self) -> float:
        return self._area

    @property
    def aspect_ratio(self) -> float:
        return self._aspect_ratio

    @property
    def is_fixed(self) -> bool:
        return self._fixed

    @property
    def shape(self) -> Shape:
        """Shape of the cell in its preferred orientation"""
        return self._shape

    @property
    def shapes(self) -> list[Shape]:
        """
        Candidate orientations of the cell: the preferred shape and,
        if the cell is not fixed, the rotated one
        """
        if self.is_fixed:
            return [self._shape]
        return [self._shape, self._shape.rotate()]

    def with_fixed(self, fixed: bool = True) -> 'Cell':
        """Returns a copy of the cell with another orientation constraint"""
        return Cell(self.name, self.area, self.aspect_ratio, fixed)
