# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""Tool to plot the shape curve of a slicing floorplan."""

import logging
from argparse import ArgumentParser
from typing import Any

import matplotlib.pyplot as plt

from slicefloor.netlist.cell_library import CellLibrary
from slicefloor.slicing.shape_curve import ShapeCurve, ShapePoint
from slicefloor.slicing.tree_builder import build_slicing_tree
from slicefloor.utils.logging_config import setup_logging


def parse_options(prog: str | None = None, args: list[str] | None = None) -> dict[str, Any]:
    """
    Parse the command-line arguments for the tool
    :param prog: tool name
    :param args: command-line arguments
    :return: a dictionary with the arguments
    """
    parser = ArgumentParser(prog=prog, description="Plots the shape curve of a slicing floorplan.",
                            usage='%(prog)s [options] NPE')
    parser.add_argument("npe", metavar="NPE", help="Normalized Polish Expression")
    parser.add_argument("-c", "--cells", required=True, help="file with the cells, YAML or text")
    parser.add_argument("-o", "--outfile", required=True, help="output image (e.g. curve.png)")
    parser.add_argument("--fixed", type=str, default="",
                        help="names of the cells with fixed orientation (e.g. --fixed 1a3)")
    parser.add_argument("-v", "--verbose", action="store_true", help="print debugging information")
    return vars(parser.parse_args(args))


def staircase(curve: ShapeCurve) -> tuple[list[float], list[float]]:
    """
    Calculates the boundary of the region of feasible shapes of a curve
    (the points sorted by increasing width, joined with steps)
    :param curve: the shape curve
    :return: the x and y coordinates of the boundary
    """
    points = sorted(curve, key=lambda p: p.width)
    xs, ys = [], []
    for p in points:
        if xs:
            xs.append(p.width)
            ys.append(ys[-1])
        xs.append(p.width)
        ys.append(p.height)
    return xs, ys


def plot_curve(curve: ShapeCurve, selected: ShapePoint, title: str = "", filename: str | None = None) -> None:
    """
    Plots a shape curve. The selected point is highlighted.
    If no filename is given, the plot is shown
    :param curve: the shape curve
    :param selected: the selected point (minimum area)
    :param title: title of the plot
    :param filename: name of the output file
    """
    fig, ax = plt.subplots(figsize=(6, 6))
    xs, ys = staircase(curve)
    ax.plot(xs, ys, color="grey", linestyle="--", zorder=1)
    ax.scatter([p.width for p in curve], [p.height for p in curve], color="tab:blue", zorder=2)
    ax.scatter([selected.width], [selected.height], color="tab:red", marker="x", s=80, zorder=3,
               label=f"min area = {selected.area:g}")
    ax.set_xlabel("width")
    ax.set_ylabel("height")
    ax.set_xlim(left=0)
    ax.set_ylim(bottom=0)
    ax.set_aspect("equal")
    ax.legend()
    ax.set_title(title)

    if filename is None:
        plt.show()
    else:
        plt.savefig(filename, dpi=150, bbox_inches='tight')
    plt.close(fig)


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

    npe = options["npe"]
    root = build_slicing_tree(npe, cells)
    root.evaluate()
    plot_curve(root.curve, root.selected, f"NPE: {npe}", options["outfile"])
    return 0


if __name__ == "__main__":
    main()
