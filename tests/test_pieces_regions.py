import unittest

from game import (
    Shape,
    Color,
    Piece,
    starting_pieces,
    REGIONS,
    region_partners,
    is_valid_position,
    PositionOutOfRange,
)


class TestPieces(unittest.TestCase):
    def test_given_symbols_when_parsing_then_shape_and_color_decoded(self):
        self.assertEqual(Piece.from_symbol('A'), Piece(Shape.A, Color.LIGHT))
        self.assertEqual(Piece.from_symbol('d'), Piece(Shape.D, Color.DARK))
        self.assertEqual(Piece(Shape.C, Color.DARK).symbol, 'c')
        self.assertEqual(str(Piece(Shape.B, Color.LIGHT)), 'B')

    def test_given_bad_symbols_when_parsing_then_value_error(self):
        for bad in ('', 'E', 'z', '1', 'AB', ' '):
            with self.assertRaises(ValueError):
                Piece.from_symbol(bad)

    def test_given_pairs_of_pieces_when_checking_clash_then_only_opposing_same_shape_clashes(self):
        a_light = Piece(Shape.A, Color.LIGHT)
        self.assertTrue(a_light.clashes_with(Piece(Shape.A, Color.DARK)))
        self.assertFalse(a_light.clashes_with(Piece(Shape.A, Color.LIGHT)))
        self.assertFalse(a_light.clashes_with(Piece(Shape.B, Color.DARK)))

    def test_given_color_when_asking_opponent_then_other_color(self):
        self.assertEqual(Color.LIGHT.opponent(), Color.DARK)
        self.assertEqual(Color.DARK.opponent(), Color.LIGHT)
        self.assertEqual(int(Color.DARK), 1)

    def test_given_color_when_dealing_starting_pieces_then_two_of_each_shape(self):
        pieces = starting_pieces(Color.DARK)
        self.assertEqual([p.symbol for p in pieces], ['a', 'a', 'b', 'b', 'c', 'c', 'd', 'd'])


class TestRegions(unittest.TestCase):
    def test_given_region_table_then_twelve_regions_cover_each_cell_three_times(self):
        self.assertEqual(len(REGIONS), 12)
        for pos in range(1, 17):
            self.assertEqual(sum(1 for r in REGIONS if pos in r), 3)

    def test_given_every_position_when_deriving_partners_then_three_triples_of_distinct_others(self):
        for pos in range(1, 17):
            triples = region_partners(pos)
            self.assertEqual(len(triples), 3)
            for triple in triples:
                self.assertEqual(len(triple), 3)
                self.assertEqual(len(set(triple)), 3)
                self.assertNotIn(pos, triple)

    def test_given_corner_when_deriving_partners_then_row_column_block_in_order(self):
        self.assertEqual(region_partners(1), ((2, 3, 4), (5, 9, 13), (2, 5, 6)))
        self.assertEqual(region_partners(16), ((13, 14, 15), (4, 8, 12), (11, 12, 15)))

    def test_given_invalid_positions_when_deriving_partners_then_out_of_range(self):
        for bad in (0, 17, -1, True, '3', None):
            self.assertFalse(is_valid_position(bad))
            with self.assertRaises(PositionOutOfRange):
                region_partners(bad)


if __name__ == '__main__':
    unittest.main()
