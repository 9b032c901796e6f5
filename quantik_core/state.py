from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board
from .errors import PieceNotHeld
from .inventory import Inventory
from .pieces import Color, Piece
from . import rules

PLAYERS = (0, 1)


def _full_inventories() -> Tuple[Inventory, Inventory]:
    return Inventory.full(Color.LIGHT), Inventory.full(Color.DARK)


@dataclass
class Game:
    """One game of Quantik: the board plus both players' inventories, mutated in place."""
    board: Board = field(default_factory=Board)
    inventories: Tuple[Inventory, Inventory] = field(default_factory=_full_inventories)

    def inventory(self, player: int) -> Inventory:
        if player not in PLAYERS:
            raise ValueError(f'Unknown player {player}')
        return self.inventories[player]

    def can_place(self, piece: Piece, pos: int) -> bool:
        return rules.can_place(self.board, piece, pos)

    def place(self, piece: Piece, pos: int) -> None:
        rules.place(self.board, piece, pos)

    def legal_positions(self, piece: Piece) -> List[int]:
        return rules.legal_positions(self.board, piece)

    def has_piece(self, piece: Piece, player: int) -> bool:
        """Checks if `player` still holds `piece`. Unknown players hold nothing."""
        if player not in PLAYERS:
            return False
        return self.inventories[player].has(piece)

    def remove_piece(self, piece: Piece, player: int) -> None:
        self.inventory(player).remove(piece)

    def player_pieces(self, player: int) -> List[Piece]:
        return self.inventory(player).pieces()

    def winner(self) -> Optional[int]:
        return rules.get_winner(self.board)

    def is_stuck(self, player: int) -> bool:
        return rules.is_stuck(self.board, self.inventory(player))

    def play_move(self, player: int, piece: Piece, pos: int) -> None:
        """
        Places `piece` for `player` and takes it out of their inventory.
        Rule failures raise QuantikError with nothing changed. A removal failure after the
        piece is on the board means the inventory check above was bypassed and is raised
        as RuntimeError.
        """
        if not self.has_piece(piece, player):
            raise PieceNotHeld(piece.symbol)
        self.place(piece, pos)
        try:
            self.remove_piece(piece, player)
        except PieceNotHeld as e:
            raise RuntimeError(f'Inventory out of sync after placing {piece.symbol}@{pos}') from e

    def render(self) -> str:
        return self.board.pretty()

    def __str__(self) -> str:
        return self.render()
