from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List


class Shape(Enum):
    """The four piece shapes shared by both players."""
    A = 'A'
    B = 'B'
    C = 'C'
    D = 'D'


class Color(IntEnum):
    """Piece color. The int value is the id of the player owning that color."""
    LIGHT = 0
    DARK = 1

    def opponent(self) -> 'Color':
        return Color.DARK if self == Color.LIGHT else Color.LIGHT


@dataclass(frozen=True)
class Piece:
    """A single piece: one shape in one color."""
    shape: Shape
    color: Color

    @property
    def symbol(self) -> str:
        """Text form used at the I/O edge: uppercase for player 0, lowercase for player 1."""
        letter = self.shape.value
        return letter if self.color == Color.LIGHT else letter.lower()

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Piece':
        """Parses a one-letter symbol such as 'A' or 'c'."""
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f'Invalid piece symbol: {symbol!r}')
        try:
            shape = Shape(symbol.upper())
        except ValueError:
            raise ValueError(f'Invalid piece symbol: {symbol!r}') from None
        color = Color.LIGHT if symbol.isupper() else Color.DARK
        return cls(shape, color)

    def clashes_with(self, other: Piece) -> bool:
        """True when `other` is the opponent's piece of the same shape."""
        return self.shape == other.shape and self.color != other.color

    def __str__(self) -> str:
        return self.symbol


def starting_pieces(color: Color) -> List[Piece]:
    """Two copies of each shape in `color`, in canonical order."""
    return [Piece(shape, color) for shape in Shape for _ in range(2)]
