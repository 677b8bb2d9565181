"""
Plain-text workspace format.

Each matrix is written as a header line, one line per row, and a blank
separator line:

    A 2 3
    1.0 2.0 3.0
    4.0 5.0 6.0

    b 2 1
    7.0
    8.0

Values are written with repr(float) so they round-trip exactly. The reader
is token based (any whitespace separates tokens), so hand-edited files with
different line breaks load the same way.
"""

from collections.abc import Mapping

from pyalgebra.core.exceptions import WorkspaceFormatError
from pyalgebra.matrix.dense import Matrix


def dump_workspace(matrices: Mapping[str, Matrix]) -> str:
    """Serialize named matrices, in mapping order."""
    blocks = []
    for name, matrix in matrices.items():
        lines = [f"{name} {matrix.rows} {matrix.cols}"]
        for row in matrix.tolist():
            lines.append("".join(f"{value!r} " for value in row))
        blocks.append("\n".join(lines) + "\n\n")
    return "".join(blocks)


def parse_workspace(text: str) -> dict[str, Matrix]:
    """
    Read matrices back from dump_workspace() output.

    A later block with an already-seen name replaces the earlier one.

    Raises:
        WorkspaceFormatError: On a truncated header, a non-integer
            dimension, or a missing or non-numeric value
        InvalidDimensionsError, TooLargeError: From Matrix construction
    """
    tokens = text.split()
    matrices: dict[str, Matrix] = {}
    pos = 0

    while pos < len(tokens):
        if pos + 3 > len(tokens):
            raise WorkspaceFormatError(
                f"Truncated matrix header: {' '.join(tokens[pos:])!r}"
            )
        name, rows_token, cols_token = tokens[pos:pos + 3]
        pos += 3

        try:
            rows, cols = int(rows_token), int(cols_token)
        except ValueError as e:
            raise WorkspaceFormatError(
                f"Matrix '{name}': dimensions must be integers, "
                f"got {rows_token!r} x {cols_token!r}",
                matrix_name=name,
            ) from e

        matrix = Matrix(rows, cols)
        for r in range(rows):
            for c in range(cols):
                if pos >= len(tokens):
                    raise WorkspaceFormatError(
                        f"Matrix '{name}': missing value for element ({r}, {c})",
                        matrix_name=name,
                    )
                try:
                    value = float(tokens[pos])
                except ValueError as e:
                    raise WorkspaceFormatError(
                        f"Matrix '{name}': failed to read value for element "
                        f"({r}, {c}), got {tokens[pos]!r}",
                        matrix_name=name,
                    ) from e
                matrix.set(r, c, value)
                pos += 1

        matrices[name] = matrix

    return matrices
