# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""Tool to calculate the cost (area) of slicing floorplans described by NPEs."""

import logging
from argparse import ArgumentParser
from typing import Any

from slicefloor.netlist.cell_library import CellLibrary
from slicefloor.slicing.floorplan import Evaluation, evaluate_npe, write_evaluations
from slicefloor.slicing.npe import Cut, chain_npe, npe_operands
from slicefloor.utils.logging_config import setup_logging, LOGGER_NAME

logger = logging.getLogger(f"{LOGGER_NAME}.cost")

# Initial NPEs for annealing (vertical chain, horizontal chain and a mixed one)
CHAIN_CELLS = "123456789abcdefgijkl"
INITIAL_VERTICAL_NPE = chain_npe(CHAIN_CELLS, Cut.V)
INITIAL_HORIZONTAL_NPE = chain_npe(CHAIN_CELLS, Cut.H)
INITIAL_OTHER_NPE = "213546H7VHVa8V9HcVHgHibdHkVHfeHVlHVjHVH"
DEFAULT_NPES = [INITIAL_VERTICAL_NPE, INITIAL_HORIZONTAL_NPE, INITIAL_OTHER_NPE]

DEFAULT_CELLS = "input_file.txt"


def parse_options(prog: str | None = None, args: list[str] | None = None) -> dict[str, Any]:
    """
    Parse the command-line arguments for the tool
    :param prog: tool name
    :param args: command-line arguments
    :return: a dictionary with the arguments
    """
    parser = ArgumentParser(prog=prog, description="Calculates the area of slicing floorplans.",
                            usage='%(prog)s [options] [NPE ...]')
    parser.add_argument("npes", metavar="NPE", nargs="*",
                        help="Normalized Polish Expressions (default: three initial NPEs)")
    parser.add_argument("-c", "--cells", default=DEFAULT_CELLS,
                        help=f"file with the cells, YAML or text (default: {DEFAULT_CELLS})")
    parser.add_argument("--fixed", type=str, default="",
                        help="names of the cells with fixed orientation (e.g. --fixed 1a3)")
    parser.add_argument("--dims", action="store_true", help="print the shape of every cell")
    parser.add_argument("-o", "--outfile", help="output file (YAML) with the results")
    parser.add_argument("-v", "--verbose", action="store_true", help="print debugging information")
    return vars(parser.parse_args(args))


def print_evaluation(ev: Evaluation, dims: bool = False) -> None:
    """
    Prints the result of an evaluation
    :param ev: the evaluation
    :param dims: whether the shape of each cell must be printed
    """
    print(f"NPE: {ev.npe}")
    if not ev.ok:
        print(f"Error: {ev.message}")
        return
    print(f"Cost: {ev.area:g}")
    if dims:
        for name, s in ev.dimensions.items():
            print(f"  {name}: {s.w:g} x {s.h:g}")


def main(prog: str | None = None, args: list[str] | None = None) -> int:
    """Main function."""
    options = parse_options(prog, args)
    setup_logging(logging.DEBUG if options["verbose"] else logging.WARNING)

    try:
        cells = CellLibrary(options["cells"])
    except OSError as e:
        print(f"Error: cannot read the cells file {options['cells']} ({e.strerror})")
        return 1
    if options["fixed"]:
        cells = cells.with_fixed(options["fixed"])

    npes = options["npes"] if options["npes"] else DEFAULT_NPES
    for npe in npes:
        missing = [name for name in npe_operands(npe) if name not in cells]
        if missing:
            logger.info("NPE %s: cells not in %s: %s", npe, options["cells"], "".join(missing))
    evaluations = [evaluate_npe(npe, cells) for npe in npes]
    for ev in evaluations:
        print_evaluation(ev, options["dims"])

    if options["outfile"] is not None:
        write_evaluations(evaluations, options["outfile"])

    return 0 if all(ev.ok for ev in evaluations) else 1


if __name__ == "__main__":
    main()
