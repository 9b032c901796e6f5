from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence

from .errors import IllegalPlacement, PositionOutOfRange
from .pieces import Piece
from .regions import CELLS, SIZE, Position, is_valid_position

DIVIDER = '=' * 18


def _empty_cells() -> List[Optional[Piece]]:
    return [None] * CELLS


@dataclass
class Board:
    """The 4x4 grid. Cells are addressed 1..16 in row-major order; None means empty."""
    cells: List[Optional[Piece]] = field(default_factory=_empty_cells)

    def __post_init__(self) -> None:
        if len(self.cells) != CELLS:
            raise ValueError(f'Board needs {CELLS} cells, got {len(self.cells)}')

    @classmethod
    def from_symbols(cls, symbols: Sequence[Optional[str]]) -> 'Board':
        """Builds a board from 16 symbols, None or '' meaning an empty cell."""
        return cls([Piece.from_symbol(s) if s else None for s in symbols])

    def to_symbols(self) -> List[Optional[str]]:
        return [p.symbol if p is not None else None for p in self.cells]

    def get(self, pos: Position) -> Optional[Piece]:
        """Gets the piece at `pos`, or None when the cell is empty or `pos` is off the board."""
        if not is_valid_position(pos):
            return None
        return self.cells[pos - 1]

    def is_empty(self, pos: Position) -> bool:
        return self.get(pos) is None

    def occupy(self, pos: Position, piece: Piece) -> None:
        """Puts `piece` on an empty cell. Cells are never cleared once occupied."""
        if not is_valid_position(pos):
            raise PositionOutOfRange(pos)
        if self.cells[pos - 1] is not None:
            raise IllegalPlacement(pos)
        self.cells[pos - 1] = piece

    def positions(self) -> Iterable[Position]:
        return range(1, CELLS + 1)

    def empty_positions(self) -> Iterator[Position]:
        for pos in self.positions():
            if self.cells[pos - 1] is None:
                yield pos

    def pretty(self) -> str:
        """Fixed-width text grid: empty cells show their position, occupied cells their symbol."""
        lines: List[str] = [DIVIDER]
        for r in range(SIZE):
            row: List[str] = []
            for c in range(SIZE):
                pos = r * SIZE + c + 1
                piece = self.cells[pos - 1]
                row.append(f' {piece.symbol}' if piece is not None else f'{pos:>2}')
            lines.append(' | '.join(row))
            lines.append(DIVIDER)
        return '\n'.join(lines)

    def __str__(self) -> str:
        return self.pretty()
