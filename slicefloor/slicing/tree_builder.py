# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Construction of slicing trees from Normalized Polish Expressions
"""

import logging
from typing import Mapping

from slicefloor.netlist.cell import Cell
from slicefloor.slicing.errors import UnknownCell, MalformedTree
from slicefloor.slicing.npe import Cut, check_npe, is_operator
from slicefloor.slicing.slicing_tree import SlicingNode, LeafNode, OperatorNode

logger = logging.getLogger(__name__)


def build_slicing_tree(npe: str, cells: Mapping[str, Cell]) -> SlicingNode:
    """
    Builds the slicing tree of an NPE. The expression is scanned from left to
    right with a stack: operands push a leaf, operators pop two nodes (the last
    one pushed is the left child) and push the new node.
    :param npe: the Normalized Polish Expression
    :param cells: the cells, indexed by name
    :return: the root of the tree
    :raises InvalidExpression: if the NPE is not valid
    :raises UnknownCell: if some operand is not a cell
    :raises MalformedTree: if the expression does not produce exactly one tree
    """
    check_npe(npe)

    stack: list[SlicingNode] = []
    for c in npe:
        if is_operator(c):
            if len(stack) < 2:
                raise MalformedTree(npe, f"operator {c} with less than two operands")
            left = stack.pop()
            right = stack.pop()
            stack.append(OperatorNode(Cut(c), right, left))
        else:
            if c not in cells:
                raise UnknownCell(c)
            stack.append(LeafNode(cells[c]))

    if len(stack) != 1:
        raise MalformedTree(npe, f"{len(stack)} nodes left after the construction")

    logger.debug("Slicing tree built for %s", npe)
    return stack[0]
