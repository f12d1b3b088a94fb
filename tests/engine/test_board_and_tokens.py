import unittest

from ludo_duel import Game, ScriptedDice, TokenState
from ludo_duel.config import config


class TestBoardAndTokens(unittest.TestCase):
    def setUp(self):
        self.game = Game(dice_source=ScriptedDice([6, 5]))

    def test_initial_tokens_in_base(self):
        tokens = self.game.state.tokens
        self.assertEqual(len(tokens), config.NUM_PLAYERS * config.TOKENS_PER_PLAYER)
        for token in tokens:
            self.assertTrue(token.is_in_base())
            self.assertEqual(token.steps_moved, 0)
            self.assertIsNone(token.track_index)
            self.assertIsNone(token.home_index)
            self.assertFalse(token.is_finished())

    def test_token_ids_are_unique(self):
        ids = [t.token_id for t in self.game.state.tokens]
        self.assertEqual(len(ids), len(set(ids)))
        self.assertIn("0-0", ids)
        self.assertIn("1-3", ids)

    def test_base_position_is_slot_index(self):
        token = self.game.state.players[1].tokens[2]
        self.assertEqual(token.position, 2)

    def test_enter_board_on_six(self):
        self.assertEqual(self.game.roll_dice(), 6)
        self.assertEqual(self.game.state.highlighted, {"0-0", "0-1", "0-2", "0-3"})

    def test_no_enter_without_six(self):
        game = Game(dice_source=ScriptedDice([5]))
        game.roll_dice()
        self.assertEqual(game.legal_moves(), [])
        self.assertEqual(game.state.highlighted, set())

    def test_entering_places_token_on_start_square(self):
        self.game.roll_dice()
        result = self.game.select_token("0-2")
        token = self.game.state.token_by_id("0-2")
        self.assertEqual(token.state, TokenState.TRACK)
        self.assertEqual(token.track_index, config.PLAYER_START_SQUARES[0])
        self.assertEqual(token.steps_moved, 0)
        self.assertTrue(result.entered_track)

    def test_blue_enters_on_its_own_start(self):
        game = Game(dice_source=ScriptedDice([6]))
        game.state.current_player = 1
        game.roll_dice()
        game.select_token("1-0")
        token = game.state.token_by_id("1-0")
        self.assertEqual(token.track_index, 26)

    def test_stacking_on_start_square_is_allowed(self):
        game = Game(dice_source=ScriptedDice([6, 6]))
        game.roll_dice()
        game.select_token("0-0")
        game.roll_dice()
        self.assertIn("0-1", game.state.highlighted)
        game.select_token("0-1")
        slots = [t.track_index for t in game.state.players[0].tokens[:2]]
        self.assertEqual(slots, [0, 0])

    def test_reset_round_trip(self):
        self.game.roll_dice()
        self.game.select_token("0-0")
        self.game.reset()
        for token in self.game.state.tokens:
            self.assertTrue(token.is_in_base())
            self.assertEqual(token.steps_moved, 0)
            self.assertFalse(token.is_finished())
        self.assertEqual(self.game.state.current_player, 0)
        self.assertIsNone(self.game.state.dice)
        self.assertEqual(self.game.state.highlighted, set())
        self.assertIsNone(self.game.state.winner)

    def test_token_to_dict(self):
        data = self.game.state.players[0].tokens[1].to_dict()
        self.assertEqual(data["token_id"], "0-1")
        self.assertEqual(data["state"], "base")
        self.assertEqual(data["position"], 1)
        self.assertFalse(data["finished"])


if __name__ == "__main__":
    unittest.main()
