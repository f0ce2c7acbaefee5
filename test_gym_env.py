import importlib
import io
import sys
import unittest
import numpy as np
from unittest.mock import patch
from slide2048 import gym_env
from slide2048.gym_env import Slide2048Env


class TestSlide2048Env(unittest.TestCase):

    def setUp(self):
        self.env = Slide2048Env()

    def test_reset_observation(self):
        obs, info = self.env.reset(seed=0)
        self.assertEqual(obs.shape, (16,))
        self.assertEqual(obs.dtype, np.float32)
        self.assertEqual(np.count_nonzero(obs), 1)
        self.assertTrue(self.env.observation_space.contains(obs))
        self.assertEqual(info, {})

    def test_step_reward_is_merge_score(self):
        self.env.reset(seed=0)
        for action in [0, 1, 2, 3] * 10:
            score_before = self.env.game.score
            obs, reward, terminated, truncated, info = self.env.step(action)
            self.assertEqual(reward, info["score"] - score_before)
            self.assertFalse(truncated)
            self.assertEqual(info["moves"], self.env.game.move_count)
            self.assertEqual(info["empty_tiles"], 16 - self.env.game.board.occupancy())
            if terminated:
                break

    def test_same_seed_same_episode(self):
        other = Slide2048Env()
        obs_a, _ = self.env.reset(seed=21)
        obs_b, _ = other.reset(seed=21)
        np.testing.assert_array_equal(obs_a, obs_b)
        for action in [2, 0, 3, 1, 2, 2]:
            obs_a, *_ = self.env.step(action)
            obs_b, *_ = other.step(action)
        np.testing.assert_array_equal(obs_a, obs_b)

    def test_render_prints_table(self):
        self.env.reset(seed=4)
        with patch('sys.stdout', new_callable=io.StringIO) as fake_out:
            self.env.render()
        text = fake_out.getvalue()
        self.assertIn("Score: 0", text)
        self.assertIn("┌─────┬─────┬─────┬─────┐", text)

    def test_imports_without_terminal_modules(self):
        with patch.dict(sys.modules, {'termios': None, 'tty': None}):
            module = importlib.reload(gym_env)
            env = module.Slide2048Env()
            obs, _ = env.reset(seed=1)
        self.assertEqual(obs.shape, (16,))


if __name__ == "__main__":
    unittest.main()
