# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""slicefloor command-line utility."""

import argparse
import sys

import tools.cost.cost  # To calculate the area of slicing floorplans
import tools.curve.curve  # To plot shape curves

# Tool names and the entry function they execute.
# The functions must accept two parameters: the tool name and the command-line arguments passed to it.
TOOLS = {"cost": tools.cost.cost.main,
         "curve": tools.curve.curve.main
         }


def main() -> int:
    """Main function."""
    parser = argparse.ArgumentParser(prog="slicefloor")
    parser.add_argument("tool", choices=TOOLS.keys(), nargs=argparse.REMAINDER, help="tool to execute")
    args = parser.parse_args()

    if args.tool:
        tool_name, tool_args = args.tool[0], args.tool[1:]
        if tool_name in TOOLS:
            return TOOLS[tool_name](f"slicefloor {tool_name}", tool_args)
        print("Unknown tool", tool_name)
        return 1
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
