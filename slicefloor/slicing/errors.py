# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Errors produced when a slicing tree cannot be built from an NPE
"""

from enum import Enum


class ErrorKind(Enum):
    """Kinds of failure of an NPE evaluation"""

    INVALID_EXPRESSION = 1  # The NPE violates the grammar
    UNKNOWN_CELL = 2  # An operand has no associated cell
    MALFORMED_TREE = 3  # The postfix expression does not produce one tree


class SlicingError(Exception):
    """Base class for the errors of the slicing tree construction"""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class InvalidExpression(SlicingError):
    """The NPE is not a valid Normalized Polish Expression"""

    def __init__(self, npe: str):
        super().__init__(ErrorKind.INVALID_EXPRESSION, f"Invalid NPE: {npe!r}")
        self.npe = npe


class UnknownCell(SlicingError):
    """An operand of the NPE does not correspond to any cell"""

    def __init__(self, name: str):
        super().__init__(ErrorKind.UNKNOWN_CELL, f"Cell {name!r} not found")
        self.name = name


class MalformedTree(SlicingError):
    """The postfix expression does not build exactly one tree"""

    def __init__(self, npe: str, reason: str):
        super().__init__(ErrorKind.MALFORMED_TREE, f"Malformed slicing tree for {npe!r}: {reason}")
        self.npe = npe
