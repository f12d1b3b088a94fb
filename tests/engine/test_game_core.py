import unittest

from engine_helpers import finish, place_on_track

from ludo_duel import Game, RandomDice, ScriptedDice, TurnPhase


class TestGameCore(unittest.TestCase):
    def setUp(self):
        self.game = Game(dice_source=ScriptedDice([4, 6, 2]))

    def test_initial_state(self):
        state = self.game.state
        self.assertEqual(len(state.players), 2)
        self.assertEqual(state.current_player, 0)
        self.assertIsNone(state.dice)
        self.assertFalse(self.game.game_over)
        self.assertEqual(state.phase, TurnPhase.AWAITING_ROLL)
        for p in state.players:
            self.assertEqual(p.finished_count(), 0)
        self.assertEqual([p.name for p in state.players], ["Red", "Blue"])
        self.assertEqual([p.start_index for p in state.players], [0, 26])

    def test_roll_dice_range(self):
        game = Game(dice_source=RandomDice(seed=11))
        for _ in range(50):
            value = game.roll_dice()
            self.assertTrue(1 <= value <= 6)
            game.state.dice = None

    def test_seeded_games_are_reproducible(self):
        a = Game(dice_source=RandomDice(seed=5))
        b = Game(dice_source=RandomDice(seed=5))
        rolls_a, rolls_b = [], []
        for _ in range(20):
            rolls_a.append(a.roll_dice())
            rolls_b.append(b.roll_dice())
            a.state.dice = b.state.dice = None
        self.assertEqual(rolls_a, rolls_b)

    def test_reroll_rejected_while_pending(self):
        self.assertEqual(self.game.roll_dice(), 4)
        self.assertIsNone(self.game.roll_dice())
        self.assertEqual(self.game.state.dice, 4)
        self.assertEqual(self.game.state.phase, TurnPhase.AWAITING_MOVE)

    def test_execute_invalid_token(self):
        self.game.roll_dice()
        before = self.game.to_dict()
        self.assertIsNone(self.game.select_token("9-9"))
        self.assertIsNone(self.game.select_token("0-0"))  # in base, needs a six
        self.assertEqual(self.game.to_dict(), before)

    def test_move_without_roll_is_ignored(self):
        token = place_on_track(self.game, 0, 0, 5)
        self.assertIsNone(self.game.apply_move(token))
        self.assertEqual(token.steps_moved, 5)

    def test_opponent_token_cannot_be_moved(self):
        place_on_track(self.game, 0, 0, 5)
        blue = place_on_track(self.game, 1, 0, 5)
        self.game.roll_dice()
        self.assertIsNone(self.game.apply_move(blue))
        self.assertEqual(blue.steps_moved, 5)

    def test_snapshot_token_cannot_be_moved(self):
        real = place_on_track(self.game, 0, 0, 5)
        self.game.roll_dice()
        copy = self.game.snapshot().players[0].tokens[0]
        self.assertIsNone(self.game.apply_move(copy))
        self.assertEqual(real.steps_moved, 5)
        self.assertEqual(copy.steps_moved, 5)
        self.assertEqual(self.game.state.current_player, 0)
        self.assertEqual(self.game.state.dice, 4)
        self.assertEqual(self.game.state.highlighted, {"0-0"})

    def test_finished_token_cannot_be_moved(self):
        done = finish(self.game, 0, 1)
        place_on_track(self.game, 0, 0, 5)
        self.game.roll_dice()
        before = self.game.to_dict()
        self.assertIsNone(self.game.apply_move(done))
        self.assertTrue(done.is_finished())
        self.assertEqual(self.game.to_dict(), before)

    def test_turn_toggles_after_non_six(self):
        place_on_track(self.game, 0, 0, 5)
        self.game.roll_dice()
        res = self.game.select_token("0-0")
        self.assertFalse(res.extra_turn)
        self.assertEqual(self.game.state.current_player, 1)
        self.assertIsNone(self.game.state.dice)
        self.assertEqual(self.game.state.highlighted, set())

    def test_six_keeps_turn(self):
        game = Game(dice_source=ScriptedDice([6, 2]))
        game.roll_dice()
        res = game.select_token("0-0")
        self.assertTrue(res.extra_turn)
        self.assertEqual(game.state.current_player, 0)
        self.assertEqual(game.state.phase, TurnPhase.AWAITING_ROLL)
        game.roll_dice()
        self.assertEqual(game.state.highlighted, {"0-0"})

    def test_same_player_mid_track_stacking(self):
        game = Game(dice_source=ScriptedDice([3]))
        place_on_track(game, 0, 0, 7)
        resting = place_on_track(game, 0, 1, 10)
        game.roll_dice()
        game.select_token("0-0")
        self.assertEqual(game.state.players[0].tokens[0].track_index, 10)
        self.assertEqual(resting.track_index, 10)

    def test_snapshot_is_detached(self):
        snap = self.game.snapshot()
        snap.players[0].tokens[0].send_to_base()
        snap.current_player = 1
        snap.dice = 3
        self.assertEqual(self.game.state.current_player, 0)
        self.assertIsNone(self.game.state.dice)


class TestPass(unittest.TestCase):
    def test_pass_when_no_legal_move(self):
        game = Game(dice_source=ScriptedDice([3]))
        game.roll_dice()
        self.assertEqual(game.legal_moves(), [])
        tokens_before = [t.to_dict() for t in game.state.tokens]
        self.assertTrue(game.pass_turn())
        self.assertEqual(game.state.current_player, 1)
        self.assertIsNone(game.state.dice)
        self.assertEqual(game.state.highlighted, set())
        self.assertEqual([t.to_dict() for t in game.state.tokens], tokens_before)

    def test_pass_rejected_with_legal_move(self):
        game = Game(dice_source=ScriptedDice([6]))
        game.roll_dice()
        self.assertFalse(game.pass_turn())
        self.assertEqual(game.state.current_player, 0)
        self.assertEqual(game.state.dice, 6)

    def test_pass_rejected_without_roll(self):
        game = Game()
        self.assertFalse(game.pass_turn())
        self.assertEqual(game.state.current_player, 0)

    def test_pass_on_six_does_not_grant_bonus(self):
        # Every token waits on the last home slot, so a six cannot move
        game = Game(dice_source=ScriptedDice([6]))
        for token in game.state.players[0].tokens:
            token.enter_home_path(57, 5)
        game.roll_dice()
        self.assertTrue(game.pass_turn())
        self.assertEqual(game.state.current_player, 1)


if __name__ == "__main__":
    unittest.main()
