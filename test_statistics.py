import io
import unittest
from contextlib import redirect_stdout
from config import GameConfig
from run_statistics import POLICIES, run_single_game, run_statistics


class TestSingleGame(unittest.TestCase):
    def test_wait_policy_stats(self):
        stats = run_single_game('wait', max_turns=30, seed=4)
        self.assertEqual(stats['policy'], 'wait')
        self.assertLessEqual(stats['turns'], 30)
        self.assertEqual(stats['level'], stats['levels_cleared'] + 1)
        self.assertGreaterEqual(stats['score'], 0)

    def test_every_policy_finishes(self):
        for policy in POLICIES:
            stats = run_single_game(policy, max_turns=50, seed=1)
            self.assertTrue(stats['died'] or stats['turns'] == 50, policy)

    def test_same_seed_same_game(self):
        self.assertEqual(run_single_game('random', max_turns=40, seed=8),
                         run_single_game('random', max_turns=40, seed=8))

    def test_seed_applies_to_given_config(self):
        config = GameConfig(level_pause=0, game_over_pause=0)
        self.assertEqual(run_single_game('random', config=config, max_turns=40, seed=6),
                         run_single_game('random', config=config, max_turns=40, seed=6))


class TestStatistics(unittest.TestCase):
    def test_report(self):
        out = io.StringIO()
        with redirect_stdout(out):
            all_stats = run_statistics(num_runs=3, policy='stay', max_turns=40, seed=2)
        self.assertEqual(len(all_stats), 3)
        self.assertIn("GAME STATISTICS REPORT", out.getvalue())
        self.assertIn("Average Score:", out.getvalue())


if __name__ == "__main__":
    unittest.main()
