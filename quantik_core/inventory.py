from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .errors import PieceNotHeld
from .pieces import Color, Piece, starting_pieces


@dataclass
class Inventory:
    """Pieces a player has not placed yet. Starts with two of each shape and only shrinks."""
    color: Color
    held: List[Piece] = field(default_factory=list)

    @classmethod
    def full(cls, color: Color) -> 'Inventory':
        return cls(color=color, held=starting_pieces(color))

    def has(self, piece: Piece) -> bool:
        return piece in self.held

    def count(self, piece: Piece) -> int:
        return self.held.count(piece)

    def remove(self, piece: Piece) -> None:
        """Removes one copy of `piece`; raises PieceNotHeld and leaves the inventory as is otherwise."""
        try:
            self.held.remove(piece)
        except ValueError:
            raise PieceNotHeld(piece.symbol) from None

    def pieces(self) -> List[Piece]:
        return list(self.held)

    def unique(self) -> List[Piece]:
        """Distinct held pieces, in inventory order."""
        seen: List[Piece] = []
        for piece in self.held:
            if piece not in seen:
                seen.append(piece)
        return seen

    def is_empty(self) -> bool:
        return not self.held

    def __len__(self) -> int:
        return len(self.held)
