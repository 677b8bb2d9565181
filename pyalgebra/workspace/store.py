"""
Named-matrix workspace.

A Workspace maps identifiers to Matrix values. Matrices go in and come out
as copies, so a matrix held by a caller never aliases the stored one.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from pyalgebra.core.exceptions import MatrixNotFoundError, ValidationError
from pyalgebra.matrix.dense import Matrix
from pyalgebra.workspace._textio import dump_workspace, parse_workspace


class Workspace:
    """
    Mapping of names to matrices with create / get / replace / delete.

    Usage:
        ws = Workspace()
        ws.create('A', 2, 2, fill=1.0)
        ws['b'] = Matrix.column([1, 2])
        ws.save('workspaces/session.txt')
        ws = Workspace.load('workspaces/session.txt')
    """

    def __init__(self, matrices: dict[str, Matrix] | None = None):
        self._matrices: dict[str, Matrix] = {}
        for name, matrix in (matrices or {}).items():
            self[name] = matrix

    def create(self, name: str, rows: int, cols: int, fill: float = 0.0) -> Matrix:
        """Create (or replace) a rows x cols matrix filled with `fill`."""
        _check_name(name)
        matrix = Matrix(rows, cols, fill)
        self._matrices[name] = matrix
        return matrix.copy()

    def __getitem__(self, name: str) -> Matrix:
        try:
            return self._matrices[name].copy()
        except KeyError:
            raise MatrixNotFoundError(
                f"Matrix '{name}' not found in workspace", name=name
            ) from None

    def __setitem__(self, name: str, matrix: Matrix) -> None:
        _check_name(name)
        if not isinstance(matrix, Matrix):
            raise ValidationError(
                f"Workspace values must be Matrix instances, got {type(matrix).__name__}"
            )
        self._matrices[name] = matrix.copy()

    def delete(self, name: str) -> None:
        if name not in self._matrices:
            raise MatrixNotFoundError(
                f"Matrix '{name}' not found in workspace", name=name
            )
        del self._matrices[name]

    def __delitem__(self, name: str) -> None:
        self.delete(name)

    def __contains__(self, name: object) -> bool:
        return name in self._matrices

    def __len__(self) -> int:
        return len(self._matrices)

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def names(self) -> list[str]:
        """Stored names, sorted."""
        return sorted(self._matrices)

    def describe(self) -> str:
        """Every matrix with its name, in name order."""
        return "\n".join(
            f"Matrix '{name}':\n{self._matrices[name]}" for name in self.names()
        )

    # === Persistence ===

    def dumps(self) -> str:
        return dump_workspace({name: self._matrices[name] for name in self.names()})

    def save(self, path: str | Path) -> Path:
        """Write the workspace to `path`, creating parent directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.dumps(), encoding='utf-8')
        return path

    @classmethod
    def loads(cls, text: str) -> Workspace:
        return cls(parse_workspace(text))

    @classmethod
    def load(cls, path: str | Path) -> Workspace:
        """
        Read a workspace written by save().

        Parsing completes before a Workspace is built, so a malformed file
        never yields a partially loaded workspace.

        Raises:
            FileNotFoundError: If path does not exist
            WorkspaceFormatError: If the contents are malformed
        """
        return cls.loads(Path(path).read_text(encoding='utf-8'))

    def __repr__(self) -> str:
        return f"Workspace(names={self.names()!r})"


def _check_name(name: object) -> None:
    if not isinstance(name, str) or not name or any(ch.isspace() for ch in name):
        raise ValidationError(
            f"Matrix names must be non-empty strings without whitespace, got {name!r}"
        )
