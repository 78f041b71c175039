
"""Grid coordinate value type"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    row: int
    column: int

    def shifted(self, rows: int, columns: int) -> "Position":
        return Position(self.row + rows, self.column + columns)
