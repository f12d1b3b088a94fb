import unittest

from engine_helpers import place_on_track, steps_to_slot

from ludo_duel import Game, ScriptedDice


class TestCaptureExtraTurnFlag(unittest.TestCase):
    def test_capture_with_six_keeps_turn(self):
        game = Game(dice_source=ScriptedDice([6]))
        place_on_track(game, 0, 0, 2)
        victim = place_on_track(game, 1, 0, steps_to_slot(game, 1, 8))
        game.roll_dice()
        res = game.select_token("0-0")
        self.assertEqual(res.captured, ["1-0"])
        self.assertTrue(res.extra_turn)
        self.assertTrue(victim.is_in_base())
        self.assertEqual(game.state.current_player, 0)

    def test_capture_without_six_passes_turn(self):
        # A capture alone does not earn a bonus roll
        game = Game(dice_source=ScriptedDice([3]))
        place_on_track(game, 0, 0, 2)
        place_on_track(game, 1, 0, steps_to_slot(game, 1, 5))
        game.roll_dice()
        res = game.select_token("0-0")
        self.assertEqual(res.captured, ["1-0"])
        self.assertFalse(res.extra_turn)
        self.assertEqual(game.state.current_player, 1)


if __name__ == "__main__":
    unittest.main()
