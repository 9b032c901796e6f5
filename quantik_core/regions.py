from __future__ import annotations

from typing import Dict, Tuple

from .errors import PositionOutOfRange

Position = int  # 1..16, row-major
Region = Tuple[int, int, int, int]
Triple = Tuple[int, int, int]

SIZE = 4
CELLS = SIZE * SIZE

# Fixed scan order: rows, then columns, then 2x2 blocks.
REGIONS: Tuple[Region, ...] = (
    (1, 2, 3, 4), (5, 6, 7, 8), (9, 10, 11, 12), (13, 14, 15, 16),
    (1, 5, 9, 13), (2, 6, 10, 14), (3, 7, 11, 15), (4, 8, 12, 16),
    (1, 2, 5, 6), (3, 4, 7, 8), (9, 10, 13, 14), (11, 12, 15, 16),
)


def is_valid_position(pos: object) -> bool:
    """True for an int (not bool) in 1..16."""
    return isinstance(pos, int) and not isinstance(pos, bool) and 1 <= pos <= CELLS


def _partners_of(pos: Position) -> Tuple[Triple, ...]:
    out = []
    for region in REGIONS:
        if pos in region:
            a, b, c = (p for p in region if p != pos)
            out.append((a, b, c))
    return tuple(out)


_PARTNERS: Dict[Position, Tuple[Triple, ...]] = {
    pos: _partners_of(pos) for pos in range(1, CELLS + 1)
}


def region_partners(pos: Position) -> Tuple[Triple, ...]:
    """For each region containing `pos` (row, column, block), the other three positions."""
    if not is_valid_position(pos):
        raise PositionOutOfRange(pos)
    return _PARTNERS[pos]
