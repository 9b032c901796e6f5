from __future__ import annotations

# Facade module that re-exports Quantik core functionality.
# Used by the Flask app and tests; single-responsibility modules live under quantik_core/*.

from quantik_core.pieces import Shape, Color, Piece, starting_pieces  # noqa: F401
from quantik_core.regions import (  # noqa: F401
    REGIONS,
    CELLS,
    Position,
    Region,
    is_valid_position,
    region_partners,
)
from quantik_core.board import Board, DIVIDER  # noqa: F401
from quantik_core.inventory import Inventory  # noqa: F401
from quantik_core.rules import (  # noqa: F401
    clashes,
    find_clash,
    can_place,
    place,
    legal_positions,
    region_winner,
    get_winner,
    is_stuck,
)
from quantik_core.state import Game, PLAYERS  # noqa: F401
from quantik_core.errors import (  # noqa: F401
    QuantikError,
    PositionOutOfRange,
    IllegalPlacement,
    PieceNotHeld,
)


def main() -> None:
    # CLI driver delegated to quantik_core.cli
    from quantik_core.cli import main as _main
    _main()


if __name__ == '__main__':
    main()
