# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Normalized Polish Expressions (NPE).

An NPE is the postfix representation of a slicing tree. The operands are the
names of the cells (one character each) and the operators are the cuts:
V (vertical cut, the sub-floorplans are placed side by side) and
H (horizontal cut, the sub-floorplans are stacked).
"""

import logging
from enum import Enum
from typing import Iterable

from slicefloor.slicing.errors import InvalidExpression
from slicefloor.utils.keywords import KW

logger = logging.getLogger(__name__)


class Cut(Enum):
    """Cut operators of a slicing tree"""
    V = KW.VERTICAL
    H = KW.HORIZONTAL


OPERATORS = frozenset(c.value for c in Cut)


def is_operator(c: str) -> bool:
    """Checks whether a character of an NPE is a cut operator"""
    return c in OPERATORS


def is_valid_npe(npe: str) -> bool:
    """
    Checks whether the NPE is valid. The conditions are:
    - no operand appears more than once,
    - no two consecutive operators are equal (normalization),
    - at every prefix, there are more operands than operators (balloting property),
    - the number of operators is the number of operands minus one.
    :param npe: the Normalized Polish Expression
    :return: True if valid, and False otherwise
    """
    operands, operators = 0, 0
    for i, c in enumerate(npe):
        if is_operator(c):
            if i + 1 < len(npe) and npe[i + 1] == c:
                logger.debug("NPE %s: repeated operator %s at position %d", npe, c, i)
                return False
            operators += 1
        else:
            if npe.find(c, i + 1) >= 0:
                logger.debug("NPE %s: repeated operand %s", npe, c)
                return False
            operands += 1
        if operands <= operators:
            logger.debug("NPE %s: balloting property violated at position %d", npe, i)
            return False
    return operators == operands - 1


def check_npe(npe: str) -> None:
    """
    Checks the validity of an NPE
    :param npe: the Normalized Polish Expression
    :raises InvalidExpression: if the NPE is not valid
    """
    if not is_valid_npe(npe):
        raise InvalidExpression(npe)


def npe_operands(npe: str) -> list[str]:
    """Returns the operands of the NPE (in order of appearance)"""
    return [c for c in npe if not is_operator(c)]


def chain_npe(names: Iterable[str], cut: Cut = Cut.V) -> str:
    """
    Generates the NPE that places all the cells in a row (vertical cuts) or
    in a column (horizontal cuts), e.g., 12V3V4V for vertical cuts.
    :param names: names of the cells
    :param cut: the cut operator
    :return: the NPE
    """
    names = list(names)
    assert len(names) > 0, "Cannot generate an NPE without cells"
    return names[0] + ''.join(name + cut.value for name in names[1:])
