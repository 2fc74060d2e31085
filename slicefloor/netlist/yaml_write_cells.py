# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

from typing import Any
from .cell import Cell
from ..geometry.geometry import Shape
from ..utils.keywords import KW


def dump_yaml_cells(cells: list[Cell]) -> dict[str, Any]:
    """
    Generates a data structure for the cells that can be dumped in YAML
    :param cells: list of cells
    :return: the data structure
    """
    return {c.name: dump_yaml_cell(c) for c in cells}


def dump_yaml_cell(cell: Cell) -> dict[str, float | bool]:
    """
    Generates a data structure for the cell that can be dumped in YAML.
    Default values (aspect ratio 1, not fixed) are not written
    :param cell: a cell
    :return: the data structure
    """
    info = dict[str, float | bool]()
    info[KW.AREA] = cell.area
    if cell.aspect_ratio != 1:
        info[KW.ASPECT_RATIO] = cell.aspect_ratio
    if cell.is_fixed:
        info[KW.FIXED] = True
    return info


def dump_yaml_shapes(shapes: dict[str, Shape]) -> dict[str, list[float]]:
    """
    Generates a data structure with the shapes of the cells
    :param shapes: shape of every cell
    :return: the data structure (name: [width, height])
    """
    return {name: [s.w, s.h] for name, s in shapes.items()}
