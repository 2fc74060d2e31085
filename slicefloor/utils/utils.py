# (c) The slicefloor authors 2026
# Licensed under the MIT License (see LICENSE.txt).

"""
Some common utils to read/write files and handle names and numbers
"""

import pathlib
import numbers
import re
from typing import Any, Optional
import yaml
import json

Python_object = object

YAML_SUFFIXES = [".yaml", ".yml"]
JSON_SUFFIXES = [".json"]


def valid_cell_name(name: Any) -> bool:
    """
    Checks whether the argument is a valid cell name: a single letter or digit.
    The cut operators (V and H) are not valid names.
    :param name: name of the cell.
    :return: True if valid, and False otherwise.
    """
    if not isinstance(name, str):
        return False
    return re.fullmatch("[A-Za-z0-9]", name) is not None and name not in "VH"


def is_number(n: Any) -> bool:
    """
    Checks whether a value is a number (int or float).
    Booleans are not considered numbers.
    :param n: the number.
    :return: True if it is a number, False otherwise.
    """
    return isinstance(n, numbers.Real) and not isinstance(n, bool)


def string_is_number(s: str) -> bool:
    """
    Checks whether a string represents a number.
    :param s: the string.
    :return: True if it represents a number, False otherwise.
    """
    try:
        float(s)
        return True
    except ValueError:
        return False


def is_file_name(s: str) -> bool:
    """Checks whether the string can be a file name: one line without
    the characters that open a JSON/YAML flow collection.

    Args:
        s (str): input string

    Returns:
        bool: True if it must be treated as a file name, False if it is JSON/YAML text
    """
    forbidden = ["\n", "{", "["]
    return all(s.count(c) == 0 for c in forbidden)


def is_json_yaml_filename(filename: str) -> bool:
    """
    Checks whether the suffix of a file name corresponds to a JSON or YAML file
    :param filename: the file name
    :return: True if it is .json, .yaml or .yml
    """
    return pathlib.Path(filename).suffix in YAML_SUFFIXES + JSON_SUFFIXES


def read_json_yaml_file(filename: str) -> Python_object:
    """
    Reads a JSON or YAML file. It raises an exception in case an error is
    produced. The type of the file is determined by the suffix of the
    filename (.yaml or .yml for YAML and .json for JSON).
    :param filename: the input file.
    :return: the Python object
    """
    fname = pathlib.Path(filename)
    str_fname = str(fname)
    suffix = fname.suffix

    if suffix in JSON_SUFFIXES:
        with open(str_fname, "r") as f:
            return json.load(f)

    if suffix in YAML_SUFFIXES:
        with open(str_fname, "r") as f:
            return yaml.safe_load(f)

    raise NameError(f"Unknown suffix for file {str_fname}")


def read_json_yaml_text(text: str, is_json: bool = False) -> Python_object:
    """
    Reads a JSON or YAML text. It raises an exception in case an error is
    produced.
    :param text: the input text
    :param is_json: indicates whether the text is in JSON (True) or YAML (False)
    :return: the Python object
    """
    return json.loads(text) if is_json else yaml.safe_load(text)


def write_json_yaml(
    data: Any, is_json: bool = True, filename: Optional[str] = None
) -> Optional[str]:
    """
    Writes the data into a JSON or YAML file. If no file name is given,
    a string with the contents is returned
    :param data: data to be written
    :param is_json: True if a JSON file is to be generated, otherwise YAML
    :param filename: name of the output file
    :return: the JSON/YAML string in case filename is None
    """

    if filename is None:  # generate an output string
        if is_json:
            return json.dumps(data)
        return yaml.dump(data, default_flow_style=False, sort_keys=False)

    with open(filename, "w") as stream:  # dump into a file
        if is_json:
            json.dump(data, stream)
        else:
            yaml.dump(data, stream, default_flow_style=False, sort_keys=False, indent=4)
        return None
