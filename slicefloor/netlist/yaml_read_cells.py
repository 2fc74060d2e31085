# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Module to read cells in JSON/YAML format or in the text format
(one cell per line: name, area and aspect ratio)
"""

from typing import Any, Iterable
from slicefloor.netlist.cell import Cell
from slicefloor.utils.keywords import KW
from slicefloor.utils.utils import (
    valid_cell_name,
    is_number,
    string_is_number,
    is_file_name,
    is_json_yaml_filename,
    read_json_yaml_file,
    read_json_yaml_text,
)


def parse_cells(stream: str) -> list[Cell]:
    """
    Parses the cells from a file or from a string of text (YAML).
    A single line without '{' or '[' is assumed to be a file name.
    Files without a JSON/YAML suffix are read in text format.
    :param stream: name of the file or YAML text
    :return: the list of cells
    """
    if not is_file_name(stream):
        return parse_yaml_cells(read_json_yaml_text(stream))

    if is_json_yaml_filename(stream):
        return parse_yaml_cells(read_json_yaml_file(stream))

    with open(stream, "r") as f:
        return parse_text_cells(f)


def parse_yaml_cells(tree: Any) -> list[Cell]:
    """
    Parses the cells from the YAML tree
    :param tree: the YAML tree (a dictionary with the key Cells)
    :return: the list of cells
    """
    assert isinstance(tree, dict), "The YAML root node is not a dictionary"
    cells = list[Cell]()
    for key, value in tree.items():
        assert key == KW.CELLS, f"Unknown key {key}"
        assert isinstance(value, dict), "The YAML node for cells is not a dictionary"
        for name, info in value.items():
            cells.append(parse_yaml_cell(str(name), info))
    return cells


def parse_yaml_cell(name: str, info: Any) -> Cell:
    """
    Parses the information of a cell. A number is interpreted as the area
    of the cell
    :param name: name of the cell
    :param info: information of the cell (dictionary or area)
    :return: a cell
    """
    assert valid_cell_name(name), f"Invalid cell name: {name}"
    if is_number(info):
        return Cell(name, info)

    assert isinstance(info, dict), f"The information for cell {name} is not a dictionary"
    params = dict[str, Any]()
    for key, value in info.items():
        match key:
            case KW.AREA:
                assert is_number(value), f"Cell {name}: incorrect area"
                params["area"] = value
            case KW.ASPECT_RATIO:
                assert is_number(value), f"Cell {name}: incorrect aspect ratio"
                params["aspect_ratio"] = value
            case KW.FIXED:
                assert isinstance(value, bool), f"Cell {name}: incorrect value for fixed (should be a boolean)"
                params["fixed"] = value
            case _:
                assert False, f"Unknown cell attribute {key}"

    assert "area" in params, f"No area defined for cell {name}"
    return Cell(name, **params)


def parse_text_cells(lines: Iterable[str]) -> list[Cell]:
    """
    Parses cells in text format. Each line contains the name, the area and
    the aspect ratio of a cell, separated by blanks. Empty lines are skipped.
    :param lines: the lines of text
    :return: the list of cells
    """
    cells = list[Cell]()
    for num, line in enumerate(lines, start=1):
        fields = line.split()
        if len(fields) == 0:
            continue
        assert len(fields) == 3, f"Line {num}: expected name, area and aspect ratio"
        name, area, ratio = fields
        assert string_is_number(area) and string_is_number(ratio), f"Line {num}: incorrect number"
        cells.append(Cell(name, float(area), float(ratio)))
    return cells
