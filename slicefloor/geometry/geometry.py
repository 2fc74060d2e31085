# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Module to represent two-dimensional shapes
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Shape:
    """
    A class to represent a two-dimensional rectilinear shape (width and height)
    """
    w: float
    h: float

    @property
    def area(self) -> float:
        """Area of the shape"""
        return self.w * self.h

    @property
    def aspect_ratio(self) -> float:
        """Aspect ratio of the shape (height/width)"""
        return self.h / self.w

    def rotate(self) -> 'Shape':
        """Returns the shape rotated 90 degrees (width and height swapped)"""
        return Shape(self.h, self.w)

    def __str__(self) -> str:
        return f"Shape(w={self.w}, h={self.h})"
