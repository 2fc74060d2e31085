# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Module to represent the collection of cells of a floorplan
"""

from collections.abc import Iterable, Iterator, Mapping
from typing import Optional
from slicefloor.netlist.cell import Cell
from slicefloor.netlist.yaml_read_cells import parse_cells
from slicefloor.netlist.yaml_write_cells import dump_yaml_cells
from slicefloor.utils.keywords import KW
from slicefloor.utils.utils import write_json_yaml, Python_object


class CellLibrary(Mapping[str, Cell]):
    """
    Class to represent the cells of a floorplan, indexed by name.
    The library is read-only.
    """

    _cells: list[Cell]  # List of cells
    _name2cell: dict[str, Cell]  # Map from cell names to cells

    def __init__(self, stream: str | Iterable[Cell]):
        """
        Constructor of a library from a file, from a string of text (YAML) or
        from a collection of cells.
        The file can be in JSON, YAML or text format.
        :param stream: name of the file, the YAML string or the cells
        """
        self._cells = parse_cells(stream) if isinstance(stream, str) else list(stream)
        self._name2cell = {}
        for c in self._cells:
            assert c.name not in self._name2cell, f"Duplicated cell {c.name}"
            self._name2cell[c.name] = c

    def __getitem__(self, name: str) -> Cell:
        return self._name2cell[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._name2cell)

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def num_cells(self) -> int:
        """Number of cells of the library"""
        return len(self._cells)

    @property
    def cells(self) -> list[Cell]:
        """List of cells of the library"""
        return self._cells

    @property
    def names(self) -> list[str]:
        """Names of the cells (in order of definition)"""
        return [c.name for c in self._cells]

    @property
    def total_area(self) -> float:
        """Sum of the areas of the cells"""
        return sum(c.area for c in self._cells)

    def get_cell(self, name: str) -> Cell:
        """
        Returns the cell with a certain name
        :param name: name of the cell
        :return: the cell
        """
        assert name in self._name2cell, f"Cell {name} does not exist"
        return self._name2cell[name]

    def with_fixed(self, names: Iterable[str]) -> 'CellLibrary':
        """
        Returns a new library in which some cells have a fixed orientation
        :param names: names of the cells to be fixed
        :return: the new library
        """
        fixed = set(names)
        for name in fixed:
            assert name in self._name2cell, f"Cell {name} does not exist"
        return CellLibrary(c.with_fixed() if c.name in fixed else c for c in self._cells)

    def write_yaml(self, filename: Optional[str] = None) -> Optional[str]:
        """
        Writes the cells into a YAML file.
        If no file name is given, a string with the yaml contents is returned
        :param filename: name of the output file
        """
        return write_json_yaml(self._write_json_yaml_data(), False, filename)

    def write_json(self, filename: Optional[str] = None) -> Optional[str]:
        """
        Writes the cells into a JSON file. If no file name is given,
        a string with the JSON contents is returned
        :param filename: name of the output file
        """
        return write_json_yaml(self._write_json_yaml_data(), True, filename)

    def _write_json_yaml_data(self) -> Python_object:
        return {KW.CELLS: dump_yaml_cells(self.cells)}
