from __future__ import annotations

import os
from typing import Iterable, List, Optional

from .board import Board
from .errors import IllegalPlacement, PositionOutOfRange
from .inventory import Inventory
from .pieces import Color, Piece
from .regions import REGIONS, Position, Region, is_valid_position, region_partners


def _debug_enabled() -> bool:
    return os.getenv('QUANTIK_DEBUG', '0').lower() in ('1', 'true', 'yes', 'on')


def clashes(piece: Piece, others: Iterable[Optional[Piece]]) -> bool:
    """True if any occupied cell among `others` holds the opponent's piece of the same shape."""
    return any(other is not None and piece.clashes_with(other) for other in others)


def can_place(board: Board, piece: Piece, pos: Position) -> bool:
    """
    Checks whether `piece` may go on `pos`.
    The cell must be empty, and no region through it may already hold the opponent's
    piece of the same shape. Pieces of the mover's own color never block.
    """
    if not is_valid_position(pos) or not board.is_empty(pos):
        return False
    for triple in region_partners(pos):
        if clashes(piece, (board.get(p) for p in triple)):
            return False
    return True


def find_clash(board: Board) -> Optional[Region]:
    """First region holding both colors of one shape, or None. Legal play never produces one."""
    for region in REGIONS:
        pieces = [p for p in (board.get(pos) for pos in region) if p is not None]
        if any(a.clashes_with(b) for a in pieces for b in pieces):
            return region
    return None


def place(board: Board, piece: Piece, pos: Position) -> None:
    """Commits `piece` to `pos` or raises without touching the board. Inventory is not involved."""
    if not is_valid_position(pos):
        if _debug_enabled():
            print(f"[rules] rejected {piece.symbol}@{pos}: out of range")
        raise PositionOutOfRange(pos)
    if not can_place(board, piece, pos):
        if _debug_enabled():
            reason = 'occupied' if not board.is_empty(pos) else 'clash'
            print(f"[rules] rejected {piece.symbol}@{pos}: {reason}")
        raise IllegalPlacement(pos)
    board.occupy(pos, piece)


def legal_positions(board: Board, piece: Piece) -> List[Position]:
    """All positions where `piece` could be placed right now, ascending."""
    return [pos for pos in board.empty_positions() if can_place(board, piece, pos)]


def region_winner(board: Board, region: Region) -> Optional[int]:
    """Returns the player whose four distinct shapes fill `region`, or None."""
    pieces = [p for p in (board.get(pos) for pos in region) if p is not None]
    for color in Color:
        shapes = {p.shape for p in pieces if p.color == color}
        if len(shapes) == 4:
            return int(color)
    return None


def get_winner(board: Board) -> Optional[int]:
    """Scans rows, columns, then blocks and reports the first winning player, if any."""
    for region in REGIONS:
        player = region_winner(board, region)
        if player is not None:
            return player
    return None


def is_stuck(board: Board, inventory: Inventory) -> bool:
    """A player is stuck when none of their remaining pieces fits anywhere. No pieces left counts."""
    for piece in inventory.unique():
        for pos in board.empty_positions():
            if can_place(board, piece, pos):
                return False
    return True
