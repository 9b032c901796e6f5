from __future__ import annotations

import argparse
import os
from typing import Callable, Optional

from .errors import QuantikError
from .pieces import Piece
from .state import Game

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _prompt_piece(game: Game, player: int, read: Reader, write: Writer) -> Piece:
    while True:
        text = read(f'Player {player}, select a piece: ').strip()
        if len(text) != 1:
            write('[Error: input is not a valid type]')
            continue
        try:
            piece = Piece.from_symbol(text)
        except ValueError:
            # Any single character is a well-formed answer, just not a piece anyone holds.
            write(f'Player {player} does not have {text}')
            continue
        if not game.has_piece(piece, player):
            write(f'Player {player} does not have {text}')
            continue
        return piece


def _prompt_position(player: int, read: Reader, write: Writer) -> int:
    while True:
        text = read(f'Player {player}, choose a position: ').strip()
        try:
            return int(text)
        except ValueError:
            write('[Error: input is not a valid type]')


def play_round(game: Game, round_no: int, read: Optional[Reader] = None, write: Optional[Writer] = None,
               show_legal: bool = False) -> None:
    """Runs one turn: prompts until a legal placement is made and removes the piece from inventory."""
    read = read or input
    write = write or print
    player = round_no % 2
    write(f'Round {round_no}:')
    write(game.render())
    write(f"Player {player} has {[p.symbol for p in game.player_pieces(player)]}.")
    while True:
        piece = _prompt_piece(game, player, read, write)
        if show_legal:
            write(f'Legal positions for {piece.symbol}: {game.legal_positions(piece)}')
        pos = _prompt_position(player, read, write)
        try:
            game.play_move(player, piece, pos)
        except QuantikError as e:
            write(f'[Error: {e}]')
            continue
        return


def run_game(game: Optional[Game] = None, read: Optional[Reader] = None, write: Optional[Writer] = None,
             show_legal: bool = False) -> Optional[int]:
    """Plays until someone wins or the player to move is stuck. Returns the winner, None on a draw."""
    read = read or input
    write = write or print
    if game is None:
        game = Game()
    winner: Optional[int] = None
    round_no = 0
    while winner is None:
        if game.is_stuck(round_no % 2):
            break
        play_round(game, round_no, read=read, write=write, show_legal=show_legal)
        winner = game.winner()
        round_no += 1
    write(game.render())
    if winner is not None:
        write(f'Player {winner} is the winner!')
    else:
        write('The game is a draw')
    write('======== THE END ========')
    return winner


def main() -> None:
    parser = argparse.ArgumentParser(description='Quantik for two players at one terminal')
    parser.add_argument('--show-legal', action='store_true', help='Show legal positions for the selected piece')
    parser.add_argument('--debug', action='store_true', help='Print rule rejection traces (same as QUANTIK_DEBUG=1)')
    args = parser.parse_args()

    if args.debug:
        os.environ['QUANTIK_DEBUG'] = '1'

    try:
        run_game(show_legal=args.show_legal)
    except (EOFError, KeyboardInterrupt):
        print()
        print('Game aborted.')


if __name__ == '__main__':
    main()
