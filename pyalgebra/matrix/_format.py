"""
Fixed-point text rendering shared by Matrix.__str__ and display code.

Layout (three decimals, width 7, every value closed by a bar):

    |  1.000|  2.000|
    | -3.500|  4.250|
"""

from typing import Any

import numpy as np
from numpy.typing import NDArray

CELL_WIDTH = 7
DECIMALS = 3


def format_row(values: NDArray[np.floating[Any]]) -> str:
    """Render one row, without the trailing newline."""
    return "|" + "".join(f"{v:{CELL_WIDTH}.{DECIMALS}f}|" for v in values)


def format_matrix(values: NDArray[np.floating[Any]]) -> str:
    """Render a 2D array; every row, including the last, ends in '\\n'."""
    return "".join(format_row(row) + "\n" for row in values)
