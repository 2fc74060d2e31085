# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Evaluation of the cost (area) of slicing floorplans described by NPEs
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional

from slicefloor.geometry.geometry import Shape
from slicefloor.netlist.cell import Cell
from slicefloor.netlist.yaml_write_cells import dump_yaml_shapes
from slicefloor.slicing.errors import ErrorKind, SlicingError
from slicefloor.slicing.tree_builder import build_slicing_tree
from slicefloor.utils.keywords import KW
from slicefloor.utils.utils import write_json_yaml

logger = logging.getLogger(__name__)


@dataclass
class Evaluation:
    """Result of the evaluation of an NPE"""
    npe: str
    area: Optional[float] = None  # Minimum area of the floorplan
    shape: Optional[Shape] = None  # Shape of the floorplan with minimum area
    dimensions: dict[str, Shape] = field(default_factory=dict)  # Shape of each cell
    error: Optional[ErrorKind] = None  # Reason of the failure
    message: str = ""  # Description of the failure

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> dict[str, Any]:
        """Data structure that can be dumped in YAML"""
        if not self.ok:
            assert self.error is not None
            return {KW.NPE: self.npe, KW.ERROR: self.error.name.lower()}
        assert self.shape is not None
        return {KW.NPE: self.npe, KW.AREA: self.area, KW.WIDTH: self.shape.w, KW.HEIGHT: self.shape.h,
                KW.SHAPES: dump_yaml_shapes(self.dimensions)}


def cost(npe: str, cells: Mapping[str, Cell]) -> float:
    """
    Calculates the minimum area of the floorplan represented by an NPE
    :param npe: the Normalized Polish Expression
    :param cells: the cells, indexed by name
    :return: the area of the floorplan
    :raises SlicingError: if no slicing tree can be built for the NPE
    """
    return build_slicing_tree(npe, cells).evaluate()


def evaluate_npe(npe: str, cells: Mapping[str, Cell]) -> Evaluation:
    """
    Evaluates an NPE. Failures are reported in the result, not raised
    :param npe: the Normalized Polish Expression
    :param cells: the cells, indexed by name
    :return: the evaluation (area, shape and dimensions of every cell)
    """
    try:
        root = build_slicing_tree(npe, cells)
    except SlicingError as e:
        logger.info("Evaluation of %s failed: %s", npe, e)
        return Evaluation(npe, error=e.kind, message=str(e))

    area = root.evaluate()
    logger.info("NPE %s: area %s", npe, area)
    return Evaluation(npe, area, root.selected.shape, root.reconstruct())


def write_evaluations(evaluations: Iterable[Evaluation], filename: Optional[str] = None) -> Optional[str]:
    """
    Writes the evaluations into a YAML file.
    If no file name is given, a string with the yaml contents is returned
    :param evaluations: the evaluations
    :param filename: name of the output file
    """
    data = {KW.RESULTS: [e.as_dict() for e in evaluations]}
    return write_json_yaml(data, False, filename)
