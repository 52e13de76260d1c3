"""
Instance and solution I/O for the separation pipeline.

This module provides:
    • extract_numeric_id(filename)
    • find_instance_files(folder, pattern, max_instances)
    • parse_instance_text(text)
    • read_instance_file(path)
    • format_solution(lines)
    • write_solution(path, lines)
    • ensure_output_dir(path)
    • save_image(path, image)

Handles all filesystem interaction in a consistent, testable way.

Instance format (whitespace separated):
    n
    x0 y0
    x1 y1
    ...

Solution format:
    <number of lines>
    v <x>      (vertical line)
    h <y>      (horizontal line)
"""

import os
import re
import glob
from typing import List, Sequence, Tuple

import cv2
import numpy as np

from models.errors import InvalidInstance
from models.line import CandidateLine


# -------------------------------------------------------------------------
#  FILENAME HANDLING
# -------------------------------------------------------------------------

def extract_numeric_id(filename: str) -> str:
    """
    Extract the first integer found in the file's base name.

    Example:
        'instances/instance07' → '07'
    """
    m = re.search(r'\d+', os.path.basename(filename))
    return m.group(0) if m else "0"


def find_instance_files(folder: str, pattern: str,
                        max_instances: int = None) -> List[Tuple[str, str]]:
    """
    Lists instance files in `folder` matching the glob `pattern`.

    Ids are zero-padded to two digits (instance5 → "05"); files numbered
    0 or above `max_instances` are left out.

    Returns:
        list of (numeric id, path), ordered by instance number
    """
    found = []
    for fname in glob.glob(os.path.join(folder, pattern)):
        if not os.path.isfile(fname):
            continue

        number = int(extract_numeric_id(fname))
        if number < 1 or (max_instances is not None and number > max_instances):
            continue
        found.append((f"{number:02d}", fname))

    found.sort(key=lambda item: (int(item[0]), item[1]))
    return found


# -------------------------------------------------------------------------
#  INSTANCE PARSING
# -------------------------------------------------------------------------

def _parse_number(token: str):
    """Integers stay int; anything else numeric becomes float."""
    try:
        return int(token)
    except ValueError:
        pass
    try:
        return float(token)
    except ValueError:
        raise InvalidInstance(f"not a number: {token!r}") from None


def parse_instance_text(text: str) -> Tuple[int, List[Tuple[float, float]]]:
    """
    Parses the contents of an instance file.

    Returns:
        declared: the point count from the header
        pairs:    the (x, y) pairs actually present

    The declared count is not checked against the pairs here;
    PointRegistry.load does that.
    """
    tokens = text.split()
    if not tokens:
        raise InvalidInstance("there are no points (empty file)")

    declared = _parse_number(tokens[0])
    if not isinstance(declared, int) or declared < 0:
        raise InvalidInstance(f"bad point count in header: {tokens[0]!r}")

    values = [_parse_number(t) for t in tokens[1:]]
    if len(values) % 2:
        raise InvalidInstance(f"odd number of coordinates ({len(values)})")

    pairs = list(zip(values[0::2], values[1::2]))
    return declared, pairs


def read_instance_file(path: str) -> Tuple[int, List[Tuple[float, float]]]:
    """
    Reads and parses one instance file.
    Missing or unreadable files raise InvalidInstance.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise InvalidInstance(f"cannot read {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise InvalidInstance(f"cannot decode {path}: {e.reason}") from e

    return parse_instance_text(text)


# -------------------------------------------------------------------------
#  SOLUTION OUTPUT
# -------------------------------------------------------------------------

def format_solution(lines: Sequence[CandidateLine]) -> str:
    """
    Serializes committed lines in commit order.
    Coordinates use %f formatting so the output is reproducible.
    """
    rows = [f"{len(lines)}"]
    for ln in lines:
        rows.append(f"{ln.axis.tag} {ln.inter:f}")
    return "\n".join(rows) + "\n"


def write_solution(path: str, lines: Sequence[CandidateLine]):
    """
    Writes the solution file, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    with open(path, "w", encoding="utf-8") as f:
        f.write(format_solution(lines))


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray):
    """
    Save an image to disk, ensuring the directory exists.
    """
    ensure_output_dir(os.path.dirname(path))
    cv2.imwrite(path, image)
