import unittest

from engine.cards import Game
from factories import column, descending, down, game_with_columns, stuck_game, up
from solver.hints import (
    Hint,
    score_move,
    find_all_valid_moves,
    find_movable_sequence_starts,
    get_hint,
    has_valid_moves,
)


class GetHintTestCase(unittest.TestCase):
    def test_simple_move(self):
        game = game_with_columns([[up("spades", "5")], [up("hearts", "6")]])
        self.assertEqual(Hint(from_column_id="col-0", card_index=0, to_column_id="col-1"), get_hint(game))

    def test_no_moves_between_kings(self):
        self.assertIsNone(get_hint(stuck_game()))

    def test_empty_game(self):
        self.assertIsNone(get_hint(Game()))
        self.assertIsNone(get_hint(game_with_columns([[], [], []])))

    def test_same_suit_reveal_beats_other_suit(self):
        game = game_with_columns([
            [down("clubs", "Q"), up("spades", "5")],
            [up("spades", "6")],
            [up("hearts", "6")],
        ])
        self.assertEqual("col-1", get_hint(game).to_column_id)

    def test_same_suit_beats_other_suit(self):
        game = game_with_columns([[up("spades", "5")], [up("hearts", "6")], [up("spades", "6")]])
        self.assertEqual("col-2", get_hint(game).to_column_id)

    def test_reveal_beats_plain_move(self):
        game = game_with_columns([[down("clubs", "Q"), up("spades", "5")], [up("hearts", "6")]])
        hint = get_hint(game)
        self.assertEqual(("col-0", 1, "col-1"), (hint.from_column_id, hint.card_index, hint.to_column_id))

    def test_revealing_king_to_empty(self):
        game = game_with_columns([[down("hearts", "Q"), up("spades", "K")], []])
        self.assertEqual(Hint("col-0", 1, "col-1"), get_hint(game))

    def test_whole_column_to_empty_is_never_suggested(self):
        game = game_with_columns([[up("spades", "K")], []])
        self.assertIsNone(get_hint(game))

    def test_partial_run_to_empty_when_it_reveals(self):
        game = game_with_columns([[down("hearts", "A"), up("spades", "K"), up("spades", "Q")], []])
        hint = get_hint(game)
        self.assertEqual(1, hint.card_index)
        self.assertEqual("col-1", hint.to_column_id)

    def test_whole_sequence(self):
        game = game_with_columns([descending("spades", "5", 3), [up("hearts", "6")]])
        hint = get_hint(game)
        self.assertEqual("col-0", hint.from_column_id)
        self.assertEqual(0, hint.card_index)

    def test_partial_sequence_when_run_is_broken(self):
        game = game_with_columns([
            [up("spades", "7"), up("hearts", "6"), up("hearts", "5"), up("hearts", "4")],
            [up("diamonds", "5")],
        ])
        self.assertEqual(3, get_hint(game).card_index)

    def test_longer_same_suit_run_wins(self):
        game = game_with_columns([descending("spades", "6", 4), [up("spades", "7")], [up("hearts", "4")]])
        hint = get_hint(game)
        self.assertEqual(0, hint.card_index)
        self.assertEqual("col-1", hint.to_column_id)

    def test_ties_go_to_first_encountered(self):
        game = game_with_columns([[up("spades", "5")], [up("hearts", "6")], [up("clubs", "6")]])
        self.assertEqual(Hint("col-0", 0, "col-1"), get_hint(game))

    def test_hint_has_no_score(self):
        hint = get_hint(game_with_columns([[up("spades", "5")], [up("hearts", "6")]]))
        self.assertFalse(hasattr(hint, "score"))


class ScoreMoveTestCase(unittest.TestCase):
    def test_each_rule(self):
        hidden_five = column([down("clubs", "Q"), up("spades", "5")], 0)
        open_five = column([up("clubs", "Q"), up("spades", "5")], 0)
        spade_six = column([up("spades", "6")], 1)
        heart_six = column([up("hearts", "6")], 1)
        empty = column([], 1)

        self.assertEqual(101, score_move(hidden_five, 1, spade_six))
        self.assertEqual(51, score_move(open_five, 1, spade_six))
        self.assertEqual(31, score_move(hidden_five, 1, heart_six))
        self.assertEqual(11, score_move(open_five, 1, heart_six))
        self.assertEqual(5, score_move(open_five, 1, empty))
        self.assertEqual(0, score_move(column([up("spades", "5")], 0), 0, empty))

    def test_king_to_empty_is_flat_only_without_reveal(self):
        # Rule d only applies to a king that is not uncovering anything.
        open_king = column([up("hearts", "3"), up("spades", "K"), up("spades", "Q")], 0)
        hidden_king = column([down("hearts", "3"), up("spades", "K"), up("spades", "Q")], 0)
        empty = column([], 1)
        self.assertEqual(25, score_move(open_king, 1, empty))
        self.assertEqual(32, score_move(hidden_king, 1, empty))


class MoveEnumerationTestCase(unittest.TestCase):
    def test_movable_starts(self):
        col = column([down("spades", "9"), up("spades", "7"), up("hearts", "6"), up("hearts", "5")])
        self.assertEqual((2, 3), find_movable_sequence_starts(col))
        self.assertEqual((), find_movable_sequence_starts(column()))

    def test_candidates_are_in_encounter_order(self):
        game = game_with_columns([[up("spades", "5")], [up("hearts", "6")], [up("clubs", "6")], [up("clubs", "4")]])
        moves = [(m.from_column_id, m.card_index, m.to_column_id) for m in find_all_valid_moves(game)]
        self.assertEqual([("col-0", 0, "col-1"), ("col-0", 0, "col-2"), ("col-3", 0, "col-0")], moves)


class HasValidMovesTestCase(unittest.TestCase):
    def test_plain_move_counts(self):
        self.assertTrue(has_valid_moves(game_with_columns([[up("spades", "5")], [up("hearts", "6")]])))

    def test_move_into_empty_column(self):
        self.assertTrue(has_valid_moves(game_with_columns([[up("hearts", "9"), up("spades", "5")], []])))

    def test_nothing_on_aces(self):
        game = game_with_columns([[up(s, "A")] for s in ("spades", "hearts", "diamonds", "clubs")])
        self.assertFalse(has_valid_moves(game))

    def test_single_kings_with_empty_columns(self):
        game = game_with_columns([[up(s, "K")] for s in ("spades", "hearts", "diamonds", "clubs")] + [[], []])
        self.assertFalse(has_valid_moves(game))

    def test_only_face_down_cards(self):
        self.assertFalse(has_valid_moves(game_with_columns([[down("spades", "5")], [down("hearts", "6")]])))

    def test_agrees_with_get_hint(self):
        for game in (stuck_game(), game_with_columns([[up("spades", "5")], [up("hearts", "6")]])):
            self.assertEqual(get_hint(game) is not None, has_valid_moves(game))


if __name__ == "__main__":
    unittest.main()
