"""
Quantik core Python package.

This package contains the board model and the pure rule helpers used by the
terminal driver (cli.py), the JSON API (app.py) and the tests.
Modules:
- pieces.py: Shape, Color, Piece
- regions.py: the 12 fixed regions and per-position partner triples
- board.py: Board, Position
- inventory.py: Inventory
- rules.py: legality, placement, win and stuck detection
- state.py: Game
- errors.py: QuantikError and its subclasses
"""
