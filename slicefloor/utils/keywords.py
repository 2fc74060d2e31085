# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Keywords for JSON/YAML files and dictionary keys
"""


class KW:
    """Class to store the keywords used in JSON/YAML files"""

    CELLS = "Cells"  # Cells (leaf modules) of the floorplan
    RESULTS = "Results"  # Evaluations of NPEs
    AREA = "area"  # Area (of a cell, or floorplan)
    ASPECT_RATIO = "aspect_ratio"  # Aspect ratio of a cell (height/width)
    FIXED = "fixed"  # Is the orientation of the cell fixed?
    NPE = "npe"  # Normalized Polish Expression
    WIDTH = "width"  # Width of a shape
    HEIGHT = "height"  # Height of a shape
    SHAPES = "shapes"  # Realized shapes of the cells
    ERROR = "error"  # Reason for a failed evaluation

    # Cut operators of the slicing tree
    VERTICAL = "V"
    HORIZONTAL = "H"
