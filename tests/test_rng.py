import unittest
from unittest import mock
import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.core.errors import EntropyError
from maze_carver.core.rng import CryptoRandom, SeededRandom, make_rng

class TestRandomSources(unittest.TestCase):
    def test_crypto_range(self):
        rng = CryptoRandom()
        values = {rng.uniform_int(4) for _ in range(200)}
        self.assertTrue(values <= {0, 1, 2, 3})
        self.assertEqual(rng.uniform_int(1), 0)

    def test_seeded_is_deterministic(self):
        a = [SeededRandom(99).uniform_int(10)]
        first = SeededRandom(99)
        second = SeededRandom(99)
        self.assertEqual([first.uniform_int(10) for _ in range(50)],
                         [second.uniform_int(10) for _ in range(50)])
        self.assertTrue(0 <= a[0] < 10)

    def test_bad_bound(self):
        with self.assertRaises(ValueError):
            CryptoRandom().uniform_int(0)
        with self.assertRaises(ValueError):
            SeededRandom(1).uniform_int(-3)

    def test_entropy_failure(self):
        with mock.patch("maze_carver.core.rng.secrets.randbelow", side_effect=OSError("no entropy")):
            with self.assertRaises(EntropyError):
                CryptoRandom().uniform_int(3)

    def test_make_rng(self):
        self.assertIsInstance(make_rng(None), CryptoRandom)
        seeded = make_rng(5)
        self.assertIsInstance(seeded, SeededRandom)
        self.assertEqual(seeded.seed, 5)

if __name__ == '__main__':
    unittest.main()
