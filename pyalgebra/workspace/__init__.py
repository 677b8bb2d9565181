"""
Named-matrix workspace and its text persistence format.

Public API:
    Workspace: name -> Matrix mapping with save/load
    dump_workspace(matrices) -> str
    parse_workspace(text) -> dict[str, Matrix]
"""

from pyalgebra.workspace.store import Workspace
from pyalgebra.workspace._textio import dump_workspace, parse_workspace

__all__ = [
    "Workspace",
    "dump_workspace",
    "parse_workspace",
]
