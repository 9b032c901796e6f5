import unittest
from unittest.mock import patch

from game import Game, Piece
from quantik_core import cli


class ScriptedIO:
    """Feeds canned answers to the driver and records everything it prints."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []
        self.out = []

    def read(self, prompt):
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    def write(self, text):
        self.out.append(text)


class TestDriver(unittest.TestCase):
    def test_given_scripted_game_when_row_completed_then_player_0_wins(self):
        io = ScriptedIO(["A", "1", "a", "11", "B", "2", "b", "12", "C", "3", "a", "16", "D", "4"])
        winner = cli.run_game(read=io.read, write=io.write)
        self.assertEqual(winner, 0)
        self.assertIn("Player 0 is the winner!", io.out)
        self.assertEqual(io.out[-1], "======== THE END ========")
        self.assertIn("Round 6:", io.out)
        self.assertNotIn("Round 7:", io.out)

    def test_given_bad_inputs_when_playing_round_then_reprompts_until_legal(self):
        g = Game()
        g.play_move(0, Piece.from_symbol("A"), 1)
        io = ScriptedIO([
            "A",     # player 1 does not own uppercase pieces
            "x",     # one character, but not a piece
            "ab",    # not a single character
            "a", "two",  # not a number
            "17",    # off the board
            "a", "2",    # clashes with A at 1
            "a", "7",
        ])
        cli.play_round(g, 1, read=io.read, write=io.write)
        self.assertIn("Player 1 does not have A", io.out)
        self.assertIn("Player 1 does not have x", io.out)
        self.assertIn("[Error: input is not a valid type]", io.out)
        self.assertIn("[Error: Position 17 is invalid]", io.out)
        self.assertIn("[Error: Invalid placement at 2]", io.out)
        self.assertEqual(g.board.get(7), Piece.from_symbol("a"))
        self.assertEqual(len(g.inventory(1)), 7)
        self.assertEqual(io.out[0], "Round 1:")

    def test_given_show_legal_when_piece_selected_then_positions_listed(self):
        g = Game()
        g.play_move(0, Piece.from_symbol("A"), 1)
        io = ScriptedIO(["a", "16"])
        cli.play_round(g, 1, read=io.read, write=io.write, show_legal=True)
        self.assertIn("Legal positions for a: [7, 8, 10, 11, 12, 14, 15, 16]", io.out)

    def test_given_stuck_player_to_move_when_running_then_draw(self):
        g = Game()
        for piece in g.player_pieces(0):
            g.remove_piece(piece, 0)
        io = ScriptedIO([])
        winner = cli.run_game(g, read=io.read, write=io.write)
        self.assertIsNone(winner)
        self.assertIn("The game is a draw", io.out)
        self.assertEqual(io.prompts, [])

    def test_given_eof_when_running_main_then_aborts_cleanly(self):
        with patch("sys.argv", ["quantik"]), \
                patch("builtins.input", side_effect=EOFError), \
                patch("builtins.print") as mock_print:
            cli.main()
        mock_print.assert_any_call("Game aborted.")


if __name__ == '__main__':
    unittest.main()
