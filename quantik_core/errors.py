from __future__ import annotations


class QuantikError(ValueError):
    """Base class for recoverable rule failures. `code` is a short stable tag."""
    code = 'quantik-error'


class PositionOutOfRange(QuantikError):
    code = 'out-of-range'

    def __init__(self, position: object) -> None:
        super().__init__(f'Position {position} is invalid')
        self.position = position


class IllegalPlacement(QuantikError):
    """Target cell is occupied or the piece clashes with an opposing piece."""
    code = 'illegal-placement'

    def __init__(self, position: int) -> None:
        super().__init__(f'Invalid placement at {position}')
        self.position = position


class PieceNotHeld(QuantikError):
    code = 'piece-not-held'

    def __init__(self, symbol: str) -> None:
        super().__init__(f'{symbol} not found')
        self.symbol = symbol
